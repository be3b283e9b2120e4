"""
Text normalization module.
Turns raw resume or job description text into a canonical token sequence
shared by skill extraction and similarity scoring.
"""
import logging
import re
from typing import Iterable, List, Optional

from utils.config import STOP_WORDS
from utils.validators import ensure_document

logger = logging.getLogger(__name__)

# Applied after lowercasing, so only ASCII letters and digits survive
_NON_ALPHANUMERIC = re.compile(r'[^a-z0-9\s]')
_WHITESPACE = re.compile(r'\s+')


class TextNormalizer:
    """Lowercase, strip punctuation, tokenize and drop stop words."""

    def __init__(self, stop_words: Optional[Iterable[str]] = None, min_token_length: int = 2):
        """
        Args:
            stop_words: Words removed from every document
            min_token_length: Tokens shorter than this are dropped
        """
        if stop_words is None:
            stop_words = STOP_WORDS
        self.stop_words = frozenset(w.lower() for w in stop_words)
        self.min_token_length = min_token_length

    def normalize(self, text: str) -> List[str]:
        """
        Normalize raw text into tokens, preserving source order.

        Args:
            text: Raw document text

        Returns:
            List of lowercase alphanumeric tokens
        """
        ensure_document(text, "text")
        if not isinstance(text, str):
            text = " ".join(text)

        if not text.strip():
            return []

        cleaned = _NON_ALPHANUMERIC.sub(' ', text.lower())
        cleaned = _WHITESPACE.sub(' ', cleaned)

        tokens = [
            token for token in cleaned.split()
            if len(token) >= self.min_token_length and token not in self.stop_words
        ]

        logger.debug(f"Normalized {len(text)} chars into {len(tokens)} tokens")
        return tokens

    def normalize_to_string(self, text: str) -> str:
        """Normalize text and join the tokens with single spaces."""
        return ' '.join(self.normalize(text))


_default_normalizer = TextNormalizer()


def normalize(text: str) -> List[str]:
    """Normalize text with the default stop-word list."""
    return _default_normalizer.normalize(text)


def normalize_to_string(text: str) -> str:
    """Normalize text with the default stop-word list and rejoin it."""
    return _default_normalizer.normalize_to_string(text)
