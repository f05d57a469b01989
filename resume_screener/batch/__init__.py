"""
Batch screening - sequential processing and result export.
"""

from .processor import BatchProcessor, BatchRunResult
from .export import ResultsExporter

__all__ = [
    "BatchProcessor",
    "BatchRunResult",
    "ResultsExporter",
]
