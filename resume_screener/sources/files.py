"""
Text sources for plain text, PDF and DOCX resumes.
"""

from pathlib import Path
from typing import Optional, Union
import io
import re

import pdfplumber
from docx import Document as DocxDocument

from resume_screener.core.errors import ExtractionError
from .base import TextSource


def _require_text(name: str, text: str) -> str:
    text = text.strip()
    if not text:
        raise ExtractionError(f"No text could be extracted from {name}")
    return text


class _FileSource(TextSource):
    """Reads from a path on disk or from bytes already in memory."""

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        data: Optional[bytes] = None,
        name: Optional[str] = None,
    ):
        if path is None and data is None:
            raise ValueError("Either path or data is required")

        self.path = Path(path) if path is not None else None
        self.data = data
        super().__init__(name or (self.path.name if self.path else "document"))

    def _open(self):
        if self.data is not None:
            return io.BytesIO(self.data)
        if not self.path.exists():
            raise ExtractionError(f"File not found: {self.path}")
        return open(self.path, 'rb')


class PlainTextSource(_FileSource):
    """Plain text file, or text supplied directly."""

    kind = "txt"

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        data: Optional[bytes] = None,
        name: Optional[str] = None,
        text: Optional[str] = None,
    ):
        if text is not None:
            data = text.encode('utf-8')
        super().__init__(path=path, data=data, name=name)

    def extract_text(self) -> str:
        with self._open() as f:
            raw = f.read()
        try:
            text = raw.decode('utf-8')
        except UnicodeDecodeError:
            text = raw.decode('latin-1')
        return _require_text(self.name, text)


class PdfTextSource(_FileSource):
    """PDF resume read with pdfplumber."""

    kind = "pdf"

    def extract_text(self) -> str:
        """Collapse whitespace within each page and join pages with newlines."""
        try:
            with self._open() as f, pdfplumber.open(f) as pdf:
                pages = []
                for page in pdf.pages:
                    page_text = page.extract_text() or ""
                    pages.append(re.sub(r'\s+', ' ', page_text))
        except ExtractionError:
            raise
        except Exception as e:
            self.logger.error(f"Error extracting PDF text from {self.name}: {e}")
            raise ExtractionError(
                "Failed to extract text from PDF. Please ensure the file is a valid PDF."
            ) from e

        return _require_text(self.name, "\n".join(pages))


class DocxTextSource(_FileSource):
    """DOCX resume read with python-docx."""

    kind = "docx"

    def extract_text(self) -> str:
        try:
            with self._open() as f:
                doc = DocxDocument(f)
                text = "\n".join(para.text for para in doc.paragraphs)
        except ExtractionError:
            raise
        except Exception as e:
            self.logger.error(f"Error extracting DOCX text from {self.name}: {e}")
            raise ExtractionError(
                "Failed to extract text from DOCX. Please ensure the file is a valid Word document."
            ) from e

        return _require_text(self.name, text)
