"""
Batch Processor - Screens every pending document in a BatchJob.

Scheduling policy:
1. One worker: documents are processed strictly one at a time, in job order,
   because text extraction is treated as a shared non-reentrant resource.
2. Cancellation is cooperative and only checked between documents; an
   extraction already in progress always finishes first.
3. A short fixed pause follows each processed document so long batches
   leave the host responsive.
4. A per-document failure marks that document as errored and the run
   carries on.
5. Status and document callbacks are observers only; an exception raised by
   one is logged and the run continues.
"""

from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Optional
import logging
import threading
import time

from resume_screener.core.errors import (
    BatchAlreadyRunningError,
    ExtractionError,
    MissingJobDescriptionError,
)
from resume_screener.core.extractors import ContactExtractor
from resume_screener.core.models import (
    BatchJob,
    CancellationToken,
    CriteriaWeights,
    Document,
    DocumentStatus,
)
from resume_screener.core.scorer import ScoringEngine


STATUS_INITIALIZING = "Initializing..."
STATUS_STOPPED = "Stopped by user"
STATUS_COMPLETE = "Analysis complete"


@dataclass
class BatchRunResult:
    """Outcome of a single pass over a batch job."""
    processed: int = 0
    completed: int = 0
    errors: int = 0
    cancelled: bool = False

    def to_dict(self) -> dict:
        return {
            "processed": self.processed,
            "completed": self.completed,
            "errors": self.errors,
            "cancelled": self.cancelled,
        }


class BatchProcessor:
    """Drives documents through contact extraction and scoring."""

    DEFAULT_THROTTLE_SECONDS = 0.1

    # Guards the running-flag check and set across every processor sharing a job
    _claim_lock = threading.Lock()

    def __init__(
        self,
        weights: Optional[CriteriaWeights] = None,
        throttle_seconds: Optional[float] = None,
        scoring_engine: Optional[ScoringEngine] = None,
        contact_extractor: Optional[ContactExtractor] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the batch processor.

        Args:
            weights: Weight vector shared by every scoring call of a run
            throttle_seconds: Pause after each processed document
            scoring_engine: Engine used to score document text
            contact_extractor: Extractor used for candidate identity
            sleep: Pause function, replaceable in tests
        """
        self.weights = weights or CriteriaWeights()
        self.throttle_seconds = (
            self.DEFAULT_THROTTLE_SECONDS if throttle_seconds is None else throttle_seconds
        )
        self.scoring_engine = scoring_engine or ScoringEngine()
        self.contact_extractor = contact_extractor or ContactExtractor()
        self._sleep = sleep

        self.logger = logging.getLogger(self.__class__.__name__)

        self._status_callback: Optional[Callable[[str], None]] = None
        self._document_callback: Optional[Callable[[Document], None]] = None

    def set_status_callback(self, callback: Callable[[str], None]) -> None:
        """Receive every status message published during a run."""
        self._status_callback = callback

    def set_document_callback(self, callback: Callable[[Document], None]) -> None:
        """Receive each document after it reaches a terminal status."""
        self._document_callback = callback

    def run(self, job: BatchJob, cancel_token: Optional[CancellationToken] = None) -> BatchRunResult:
        """
        Process all pending documents in the job.

        Args:
            job: Batch job to process
            cancel_token: Stop flag to poll; defaults to the job's own token,
                which is reset when the run starts

        Returns:
            BatchRunResult summarising the pass

        Raises:
            MissingJobDescriptionError: if the job has no job description
            BatchAlreadyRunningError: if another run is active on the job
        """
        job_description, cancel_token = self._claim(job, cancel_token)
        return self._run(job, job_description, cancel_token)

    def start(
        self,
        job: BatchJob,
        executor: ThreadPoolExecutor,
        cancel_token: Optional[CancellationToken] = None,
    ) -> Future:
        """
        Run the batch on an executor so callers can request a stop meanwhile.

        The job is claimed before submitting: preconditions raise here rather
        than inside the future, and a stop requested while the run is still
        queued is honoured once it starts.
        """
        job_description, cancel_token = self._claim(job, cancel_token)

        try:
            future = executor.submit(self._run, job, job_description, cancel_token)
        except BaseException:
            job.is_running = False
            raise

        future.add_done_callback(lambda f: self._release_if_cancelled(job, f))
        return future

    def _claim(
        self,
        job: BatchJob,
        cancel_token: Optional[CancellationToken],
    ) -> tuple[str, CancellationToken]:
        """Check preconditions and mark the job running; returns the run's snapshot."""
        with self._claim_lock:
            if job.is_running:
                raise BatchAlreadyRunningError("A batch run is already active for this job")

            job_description = job.job_description
            if not job_description or not job_description.strip():
                raise MissingJobDescriptionError("Please enter a job description first.")

            if cancel_token is None:
                cancel_token = job.cancel_token
                cancel_token.reset()

            job.is_running = True

        return job_description, cancel_token

    def _release_if_cancelled(self, job: BatchJob, future: Future) -> None:
        # A future cancelled while queued never reaches _run's cleanup
        if future.cancelled():
            job.is_running = False

    def _run(
        self,
        job: BatchJob,
        job_description: str,
        cancel_token: CancellationToken,
    ) -> BatchRunResult:
        result = BatchRunResult()

        try:
            self._publish(job, STATUS_INITIALIZING)
            self.logger.info(f"Starting batch of {len(job.documents)} documents")

            for document in list(job.documents):
                if cancel_token.is_cancelled:
                    result.cancelled = True
                    self._publish(job, STATUS_STOPPED)
                    self.logger.warning(
                        f"Batch stopped by user after {result.processed} documents"
                    )
                    break

                if document.status != DocumentStatus.PENDING:
                    continue

                self._process_document(job, document, job_description, result)
                self._sleep(self.throttle_seconds)
        finally:
            job.is_running = False

        if not result.cancelled:
            job.analyzed = True
            self._publish(job, STATUS_COMPLETE)
            self.logger.info(
                f"Batch complete: {result.completed} completed, {result.errors} errors"
            )

        return result

    def _process_document(
        self,
        job: BatchJob,
        document: Document,
        job_description: str,
        result: BatchRunResult,
    ) -> None:
        document.status = DocumentStatus.PROCESSING
        self._publish(job, f"Processing {document.name}...")

        try:
            if document.source is None:
                raise ExtractionError(f"No text source for {document.name}")

            text = document.source.extract_text()
            document.text = text
            document.contact = self.contact_extractor.extract(text)
            document.analysis = self.scoring_engine.score(text, job_description, self.weights)
            document.status = DocumentStatus.COMPLETED
            document.error = None
            result.completed += 1
            self.logger.info(f"Scored {document.name}: {document.analysis.overall_score}")

        except Exception as e:
            document.status = DocumentStatus.ERROR
            document.error = str(e)
            result.errors += 1
            self.logger.warning(f"Error processing {document.name}: {e}")

        result.processed += 1
        self._notify(self._document_callback, document)

    def _publish(self, job: BatchJob, message: str) -> None:
        job.status_message = message
        self._notify(self._status_callback, message)

    def _notify(self, callback: Optional[Callable], payload) -> None:
        """Invoke an observer callback; a failing observer never aborts the batch."""
        if not callback:
            return
        try:
            callback(payload)
        except Exception:
            self.logger.exception(f"Callback {callback!r} failed")
