"""
Keyword Matcher - Lexical overlap between a resume and a job description.
"""

import logging
import re


class KeywordMatcher:
    """Measures how many job description keywords appear in a document."""

    STOP_WORDS = frozenset({
        "the", "and", "or", "but", "in", "on", "at", "to", "for", "of",
        "with", "by", "a", "an", "is", "are", "was", "were", "be", "been",
        "have", "has", "had", "will", "would", "could", "should", "may",
        "might", "can", "this", "that", "these", "those", "i", "you", "he",
        "she", "it", "we", "they",
    })

    MIN_TOKEN_LENGTH = 3

    _NON_WORD = re.compile(r'[^\w\s]', re.ASCII)
    _ALPHA = re.compile(r'[a-z]+')

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def extract_keywords(self, text: str) -> list[str]:
        """Tokenize text into lowercase alphabetic keywords, stop words removed."""
        cleaned = self._NON_WORD.sub(' ', text.lower())
        return [
            word for word in cleaned.split()
            if len(word) >= self.MIN_TOKEN_LENGTH
            and word not in self.STOP_WORDS
            and self._ALPHA.fullmatch(word)
        ]

    def match(self, document_text: str, job_description: str) -> float:
        """
        Percentage (0-100) of distinct job keywords found in the document.

        A blank job description, or one with no usable keywords, scores 0.
        """
        if not job_description or not job_description.strip():
            return 0.0

        job_keywords = set(self.extract_keywords(job_description))
        if not job_keywords:
            return 0.0

        document_keywords = set(self.extract_keywords(document_text))
        matches = job_keywords & document_keywords

        self.logger.debug(f"Matched {len(matches)} of {len(job_keywords)} job keywords")
        return len(matches) / len(job_keywords) * 100

