"""
Base class for document text sources.
"""

from abc import ABC, abstractmethod
import logging


class TextSource(ABC):
    """Abstract base class for anything that can yield a document's plain text."""

    def __init__(self, name: str):
        self._name = name
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def name(self) -> str:
        """Display name of the document."""
        return self._name

    @property
    @abstractmethod
    def kind(self) -> str:
        """Short format label, e.g. "pdf"."""
        pass

    @abstractmethod
    def extract_text(self) -> str:
        """
        Produce the document's plain text.

        Returns:
            Non-empty extracted text

        Raises:
            ExtractionError: if no text could be produced
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
