"""Tests for the core data models."""

import pytest

from resume_screener.core.errors import BatchAlreadyRunningError, ConfigurationError
from resume_screener.core.models import (
    BatchJob,
    CancellationToken,
    CriteriaWeights,
    Document,
    DocumentStatus,
    ScoreBreakdown,
)


class TestCriteriaWeights:
    """Tests for weight validation."""

    def test_defaults(self):
        weights = CriteriaWeights()

        assert weights.to_dict() == {
            "skills": 0.4,
            "experience": 0.3,
            "education": 0.2,
            "keywords": 0.1,
        }
        assert weights.total == pytest.approx(1.0)

    def test_weights_need_not_sum_to_one(self):
        weights = CriteriaWeights(skills=1, experience=1, education=1, keywords=1)

        assert weights.total == 4.0
        assert isinstance(weights.skills, float)

    @pytest.mark.parametrize("value", [-0.01, 1.01, "0.5", None, True])
    def test_invalid_values(self, value):
        with pytest.raises(ConfigurationError):
            CriteriaWeights(skills=value)

    def test_from_dict_missing_key(self):
        with pytest.raises(ConfigurationError, match="Missing weight"):
            CriteriaWeights.from_dict({"skills": 0.4, "experience": 0.3, "education": 0.2})

    def test_from_dict_unknown_key(self):
        data = {"skills": 0.4, "experience": 0.3, "education": 0.2, "keywords": 0.1, "luck": 0.5}

        with pytest.raises(ConfigurationError, match="Unknown weight"):
            CriteriaWeights.from_dict(data)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            CriteriaWeights(keywords=2)


class TestBatchJob:
    """Tests for job bookkeeping."""

    def test_add_document_stamps_order(self):
        job = BatchJob(documents=[Document(name="a"), Document(name="b")])
        added = job.add_document(Document(name="c"))

        assert [doc.order for doc in job.documents] == [0, 1, 2]
        assert added.order == 2
        assert added.status == DocumentStatus.PENDING

    def test_order_not_reused_after_removal(self):
        job = BatchJob()
        first, second = job.add_documents([Document(name="a"), Document(name="b")])
        job.remove_document(first.id)
        third = job.add_document(Document(name="c"))

        assert third.order > second.order

    def test_remove_document(self):
        job = BatchJob()
        doc = job.add_document(Document(name="a"))

        assert job.remove_document(doc.id)
        assert not job.remove_document(doc.id)
        assert job.documents == []

    def test_remove_while_running(self):
        job = BatchJob()
        doc = job.add_document(Document(name="a"))
        job.is_running = True

        with pytest.raises(BatchAlreadyRunningError):
            job.remove_document(doc.id)

        assert job.get_document(doc.id) is doc

    def test_document_ids_unique(self):
        assert Document().id != Document().id

    def test_ranked(self):
        job = BatchJob()
        low = job.add_document(Document(name="low", analysis=ScoreBreakdown(overall_score=40)))
        tie_first = job.add_document(Document(name="tie1", analysis=ScoreBreakdown(overall_score=75)))
        pending = job.add_document(Document(name="pending"))
        tie_second = job.add_document(Document(name="tie2", analysis=ScoreBreakdown(overall_score=75)))

        assert job.ranked() == [tie_first, tie_second, low, pending]

    def test_request_stop(self):
        job = BatchJob()
        job.request_stop()

        assert job.cancel_token.is_cancelled
        assert job.status_message == "Stopping..."

    def test_summary(self):
        job = BatchJob()
        job.add_document(Document(name="a", status=DocumentStatus.COMPLETED))
        job.add_document(Document(name="b", status=DocumentStatus.ERROR))
        job.add_document(Document(name="c"))

        summary = job.summary()

        assert summary["total"] == 3
        assert summary["by_status"] == {"pending": 1, "processing": 0, "completed": 1, "error": 1}
        assert summary["remaining"] == 1
        assert not summary["analyzed"]


class TestCancellationToken:
    """Tests for CancellationToken."""

    def test_cancel_and_reset(self):
        token = CancellationToken()
        assert not token.is_cancelled

        token.cancel()
        assert token.is_cancelled

        token.reset()
        assert not token.is_cancelled

    def test_terminal_statuses(self):
        assert DocumentStatus.COMPLETED.is_terminal
        assert DocumentStatus.ERROR.is_terminal
        assert not DocumentStatus.PENDING.is_terminal
        assert not DocumentStatus.PROCESSING.is_terminal
