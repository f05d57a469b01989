"""
Text sources that feed plain document text into the screening engine.
"""

from .base import TextSource
from .files import PlainTextSource, PdfTextSource, DocxTextSource
from .collector import collect_documents, expand_archive, source_for_path

__all__ = [
    "TextSource",
    "PlainTextSource",
    "PdfTextSource",
    "DocxTextSource",
    "collect_documents",
    "expand_archive",
    "source_for_path",
]
