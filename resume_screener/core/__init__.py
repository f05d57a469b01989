"""Core models, extractors and scoring for resume screening."""

from .models import (
    BatchJob,
    CancellationToken,
    Contact,
    CriteriaWeights,
    Document,
    DocumentStatus,
    EducationLevel,
    ScoreBreakdown,
)
from .errors import (
    ScreenerError,
    MissingJobDescriptionError,
    ExtractionError,
    BatchAlreadyRunningError,
    ConfigurationError,
)
from .extractors import (
    ContactExtractor,
    SkillExtractor,
    ExperienceEstimator,
    EducationClassifier,
)
from .keywords import KeywordMatcher
from .scorer import ScoringEngine

__all__ = [
    "BatchJob",
    "CancellationToken",
    "Contact",
    "CriteriaWeights",
    "Document",
    "DocumentStatus",
    "EducationLevel",
    "ScoreBreakdown",
    "ScreenerError",
    "MissingJobDescriptionError",
    "ExtractionError",
    "BatchAlreadyRunningError",
    "ConfigurationError",
    "ContactExtractor",
    "SkillExtractor",
    "ExperienceEstimator",
    "EducationClassifier",
    "KeywordMatcher",
    "ScoringEngine",
]
