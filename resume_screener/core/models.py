"""
Core data models for the resume screening system.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, TYPE_CHECKING
import threading
import uuid

from .errors import BatchAlreadyRunningError, ConfigurationError

if TYPE_CHECKING:
    from resume_screener.sources.base import TextSource


class DocumentStatus(Enum):
    """Lifecycle status of a candidate document within a batch."""
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in (DocumentStatus.COMPLETED, DocumentStatus.ERROR)


class EducationLevel(Enum):
    """Highest education credential mentioned in a document."""
    NONE = "none"
    CERTIFICATE = "certificate"
    ASSOCIATES = "associates"
    BACHELORS = "bachelors"
    MASTERS = "masters"
    PHD = "phd"

    @property
    def has_advanced(self) -> bool:
        return self in (EducationLevel.MASTERS, EducationLevel.PHD)


@dataclass
class Contact:
    """Candidate identity recovered from raw text. Every field may be empty."""
    name: str = ""
    email: str = ""
    phone: str = ""

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
        }


@dataclass
class CriteriaWeights:
    """
    Weight vector applied to the four sub-scores.

    Values are not normalized; each must lie in [0, 1].
    """
    skills: float = 0.4
    experience: float = 0.3
    education: float = 0.2
    keywords: float = 0.1

    KEYS = ("skills", "experience", "education", "keywords")

    def __post_init__(self):
        for key in self.KEYS:
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"Weight '{key}' must be a number, got {value!r}")
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"Weight '{key}' must be between 0 and 1, got {value}")
            setattr(self, key, float(value))

    @classmethod
    def from_dict(cls, data: dict) -> "CriteriaWeights":
        """Build weights from a mapping holding exactly the four required keys."""
        missing = [key for key in cls.KEYS if key not in data]
        unknown = [key for key in data if key not in cls.KEYS]
        if missing:
            raise ConfigurationError(f"Missing weight(s): {', '.join(missing)}")
        if unknown:
            raise ConfigurationError(f"Unknown weight(s): {', '.join(unknown)}")
        return cls(**{key: data[key] for key in cls.KEYS})

    def to_dict(self) -> dict:
        return {key: getattr(self, key) for key in self.KEYS}

    @property
    def total(self) -> float:
        return sum(getattr(self, key) for key in self.KEYS)


@dataclass
class ScoreBreakdown:
    """Scoring result for a single document against a job description."""
    skills_match: int = 0  # 0-100
    experience_match: int = 0  # 0-100
    education_match: int = 0  # 0-100
    keyword_match: int = 0  # 0-100
    overall_score: int = 0  # 0-100
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)
    recommendation: str = ""

    # Raw signals the scores were derived from
    detected_skills: list[str] = field(default_factory=list)
    experience_years: int = 0
    education_level: EducationLevel = EducationLevel.NONE

    def to_dict(self) -> dict:
        return {
            "overall_score": self.overall_score,
            "skills_match": self.skills_match,
            "experience_match": self.experience_match,
            "education_match": self.education_match,
            "keyword_match": self.keyword_match,
            "strengths": self.strengths,
            "weaknesses": self.weaknesses,
            "recommendation": self.recommendation,
            "detected_skills": self.detected_skills,
            "experience_years": self.experience_years,
            "education_level": self.education_level.value,
        }


@dataclass
class Document:
    """A candidate document queued for screening."""
    name: str = ""
    source: Optional["TextSource"] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    status: DocumentStatus = DocumentStatus.PENDING
    text: str = ""
    error: Optional[str] = None
    contact: Contact = field(default_factory=Contact)
    analysis: Optional[ScoreBreakdown] = None
    order: int = 0  # position in upload order, used for tie-breaks

    @property
    def score(self) -> int:
        return self.analysis.overall_score if self.analysis else 0

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status.value,
            "error": self.error,
            "contact": self.contact.to_dict(),
            "analysis": self.analysis.to_dict() if self.analysis else None,
            "order": self.order,
        }


class CancellationToken:
    """Cooperative stop flag, polled by the batch processor between documents."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    def reset(self) -> None:
        self._event.clear()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()


@dataclass
class BatchJob:
    """An ordered collection of documents screened against one job description."""
    job_description: str = ""
    documents: list[Document] = field(default_factory=list)
    is_running: bool = False
    analyzed: bool = False
    status_message: str = ""
    cancel_token: CancellationToken = field(default_factory=CancellationToken)

    def __post_init__(self):
        for index, document in enumerate(self.documents):
            document.order = index

    def add_document(self, document: Document) -> Document:
        """Append a document, stamping its upload position."""
        document.order = self._next_order()
        self.documents.append(document)
        return document

    def add_documents(self, documents: list[Document]) -> list[Document]:
        return [self.add_document(doc) for doc in documents]

    def remove_document(self, document_id: str) -> bool:
        """
        Remove a document from the job.

        Returns:
            True if removed, False if not found

        Raises:
            BatchAlreadyRunningError: if a run is active
        """
        if self.is_running:
            raise BatchAlreadyRunningError("Cannot remove documents while a batch is running")

        document = self.get_document(document_id)
        if document is None:
            return False
        self.documents.remove(document)
        return True

    def get_document(self, document_id: str) -> Optional[Document]:
        for document in self.documents:
            if document.id == document_id:
                return document
        return None

    def request_stop(self) -> None:
        """Ask the active run to stop at the next document boundary."""
        self.cancel_token.cancel()
        self.status_message = "Stopping..."

    def documents_by_status(self, status: DocumentStatus) -> list[Document]:
        return [doc for doc in self.documents if doc.status == status]

    def completed(self) -> list[Document]:
        return self.documents_by_status(DocumentStatus.COMPLETED)

    def ranked(self) -> list[Document]:
        """Documents by overall score, highest first; ties keep upload order."""
        return sorted(self.documents, key=lambda d: (-d.score, d.order))

    def summary(self) -> dict:
        counts = {status.value: len(self.documents_by_status(status)) for status in DocumentStatus}
        return {
            "total": len(self.documents),
            "by_status": counts,
            "remaining": sum(1 for doc in self.documents if not doc.status.is_terminal),
            "analyzed": self.analyzed,
            "is_running": self.is_running,
        }

    def _next_order(self) -> int:
        if not self.documents:
            return 0
        return max(doc.order for doc in self.documents) + 1
