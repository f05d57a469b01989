"""
Source Collector - Turns uploaded paths into an ordered list of Documents.

Directories are walked in sorted order and ZIP archives are expanded in
archive order. Unsupported file types are skipped.
"""

from pathlib import Path
from typing import Iterable, Optional, Union
import logging
import zipfile

from resume_screener.core.errors import ExtractionError
from resume_screener.core.models import Document
from .base import TextSource
from .files import DocxTextSource, PdfTextSource, PlainTextSource


logger = logging.getLogger(__name__)

SOURCE_TYPES = {
    ".pdf": PdfTextSource,
    ".docx": DocxTextSource,
    ".txt": PlainTextSource,
}

ARCHIVE_EXTENSIONS = {".zip"}


def source_for_path(path: Union[str, Path]) -> Optional[TextSource]:
    """Pick the text source for a file, or None if the type is unsupported."""
    path = Path(path)
    source_type = SOURCE_TYPES.get(path.suffix.lower())
    if source_type is None:
        return None
    return source_type(path=path)


def expand_archive(path: Union[str, Path]) -> list[Document]:
    """
    Create a Document for every supported file inside a ZIP archive.

    Raises:
        ExtractionError: if the archive cannot be read
    """
    path = Path(path)
    documents = []

    try:
        with zipfile.ZipFile(path) as archive:
            for info in archive.infolist():
                if info.is_dir():
                    continue
                source_type = SOURCE_TYPES.get(Path(info.filename).suffix.lower())
                if source_type is None:
                    continue
                source = source_type(data=archive.read(info), name=info.filename)
                documents.append(Document(name=info.filename, source=source))
    except (zipfile.BadZipFile, OSError) as e:
        raise ExtractionError(f"Error processing ZIP file: {path.name}") from e

    logger.info(f"Expanded {len(documents)} documents from {path.name}")
    return documents


def collect_documents(paths: Iterable[Union[str, Path]]) -> list[Document]:
    """
    Build Documents from files, directories and ZIP archives.

    Args:
        paths: Paths in upload order

    Returns:
        Documents in the same order, unsupported files dropped
    """
    documents = []

    for raw_path in paths:
        path = Path(raw_path)

        if path.is_dir():
            documents.extend(collect_documents(sorted(p for p in path.iterdir())))
        elif path.suffix.lower() in ARCHIVE_EXTENSIONS:
            documents.extend(expand_archive(path))
        else:
            source = source_for_path(path)
            if source is None:
                logger.debug(f"Skipping unsupported file: {path}")
                continue
            documents.append(Document(name=path.name, source=source))

    return documents
