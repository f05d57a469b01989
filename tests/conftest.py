"""
Shared fixtures for the resume screener tests.
"""
import pytest

from resume_screener.batch import BatchProcessor
from resume_screener.core.errors import ExtractionError
from resume_screener.core.models import BatchJob, CriteriaWeights, Document
from resume_screener.sources import PlainTextSource


JOB_DESCRIPTION = (
    "Looking for a Python developer with AWS and 5+ years experience, "
    "bachelor's degree required."
)

JANE_DOE_RESUME = (
    "Jane Doe. jane@example.com. (555) 123-4567. "
    "Bachelor of Science in Computer Science. "
    "6 years experience with Python and AWS."
)


class FailingSource(PlainTextSource):
    """Text source whose extraction always fails."""

    def __init__(self, name: str = "broken.pdf"):
        super().__init__(text="unused", name=name)

    def extract_text(self) -> str:
        raise ExtractionError("Failed to extract text from PDF. Please ensure the file is a valid PDF.")


@pytest.fixture
def job_description():
    return JOB_DESCRIPTION


@pytest.fixture
def jane_resume():
    return JANE_DOE_RESUME


@pytest.fixture
def default_weights():
    return CriteriaWeights()


@pytest.fixture
def make_document():
    """Factory for in-memory documents."""
    def _make(text: str, name: str = "resume.txt") -> Document:
        return Document(name=name, source=PlainTextSource(text=text, name=name))
    return _make


@pytest.fixture
def make_job(make_document, job_description):
    """Factory for a batch job holding `count` simple resumes."""
    def _make(count: int, description: str = None) -> BatchJob:
        job = BatchJob(job_description=job_description if description is None else description)
        for i in range(count):
            job.add_document(make_document(
                f"Candidate {chr(65 + i)} Smith\n{i + 1} years experience with Python",
                name=f"resume_{i + 1}.txt",
            ))
        return job
    return _make


@pytest.fixture
def processor():
    """Processor that never actually sleeps between documents."""
    return BatchProcessor(sleep=lambda seconds: None)
