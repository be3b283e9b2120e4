"""
Skill extraction module with an exact, substring and fuzzy matching chain.
Matches normalized document text against a caller-supplied skill vocabulary.
"""
import logging
import re
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from rapidfuzz.distance import Levenshtein

from scoring.models import SkillMatch
from utils.config import (
    DEFAULT_FUZZY_THRESHOLD,
    EXACT_MATCH_CONFIDENCE,
    FUZZY_CONFIDENCE_MULTIPLIER,
    SUBSTRING_MATCH_CONFIDENCE,
)
from utils.validators import ensure_document, ensure_vocabulary

logger = logging.getLogger(__name__)


def levenshtein_similarity(first: str, second: str) -> float:
    """
    Normalized edit-distance similarity.

    1 - distance / max(len(first), len(second)), where distance counts
    single-character inserts, deletes and substitutions.

    Returns:
        1.0 for identical strings, 0.0 when exactly one string is empty
    """
    if first == second:
        return 1.0

    if not first or not second:
        return 0.0

    distance = Levenshtein.distance(first, second)
    return 1.0 - distance / max(len(first), len(second))


class SkillExtractor:
    """Extract skills from normalized text with confidence scores."""

    def __init__(
        self,
        fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD,
        exact_confidence: float = EXACT_MATCH_CONFIDENCE,
        substring_confidence: float = SUBSTRING_MATCH_CONFIDENCE,
        fuzzy_multiplier: float = FUZZY_CONFIDENCE_MULTIPLIER
    ):
        """
        Initialize skill extractor.

        Args:
            fuzzy_threshold: Minimum edit similarity for a fuzzy match
            exact_confidence: Confidence of a whole-word match
            substring_confidence: Confidence of a raw substring match
            fuzzy_multiplier: Scales fuzzy similarity into a confidence
        """
        self._check_threshold(fuzzy_threshold)
        self.fuzzy_threshold = fuzzy_threshold
        self.exact_confidence = exact_confidence
        self.substring_confidence = substring_confidence
        self.fuzzy_multiplier = fuzzy_multiplier

    @staticmethod
    def _check_threshold(threshold: float) -> None:
        if threshold is None or not 0.0 < threshold <= 1.0:
            raise ValueError(f"fuzzy_threshold must be in (0, 1], got {threshold}")

    @staticmethod
    def _prepare_text(document: Union[str, Sequence[str]]) -> str:
        """Rebuild the un-tokenized lowercase text from a document."""
        ensure_document(document, "document")

        if isinstance(document, str):
            tokens = document.split()
        else:
            tokens = [str(token) for token in document]

        return ' '.join(tokens).lower()

    @staticmethod
    def _unique_skills(vocabulary: Iterable[str]) -> List[Tuple[str, str]]:
        """
        Collapse case-insensitive duplicates.

        Returns:
            (display name, lowercase name) pairs; the first occurrence's
            casing is kept as the display name
        """
        seen = set()
        skills = []

        for skill in vocabulary:
            if skill is None:
                continue

            name = str(skill).strip()
            if not name:
                continue

            lowered = name.lower()
            if lowered in seen:
                continue

            seen.add(lowered)
            skills.append((name, lowered))

        return skills

    def _match_exact(self, text: str, skill: str) -> float:
        """Confidence for a single skill from the exact/substring phase."""
        pattern = r'(?<!\S)' + re.escape(skill) + r'(?!\S)'
        if re.search(pattern, text):
            return self.exact_confidence

        if skill in text:
            return self.substring_confidence

        return 0.0

    def _best_fuzzy_similarity(self, skill: str, words: Iterable[str], threshold: float) -> float:
        best = 0.0

        for word in words:
            longest = max(len(skill), len(word))
            # Length difference alone bounds the similarity from above
            if 1.0 - abs(len(skill) - len(word)) / longest < threshold:
                continue

            similarity = levenshtein_similarity(skill, word)
            if similarity > best:
                best = similarity

        return best

    def extract_exact(
        self,
        document: Union[str, Sequence[str]],
        vocabulary: Iterable[str]
    ) -> Dict[str, float]:
        """
        Exact and substring matching only.

        Args:
            document: Normalized text or tokens
            vocabulary: Candidate skill names

        Returns:
            Mapping of skill name to confidence
        """
        text = self._prepare_text(document)
        ensure_vocabulary(vocabulary)

        extracted = {}
        if not text:
            return extracted

        for name, lowered in self._unique_skills(vocabulary):
            confidence = self._match_exact(text, lowered)
            if confidence > 0:
                extracted[name] = confidence

        return extracted

    def extract(
        self,
        document: Union[str, Sequence[str]],
        vocabulary: Iterable[str],
        fuzzy_threshold: Optional[float] = None
    ) -> Dict[str, float]:
        """
        Extract skills with exact, substring and fuzzy matching.

        Skills found by the exact/substring phase are not retried fuzzily.
        A fuzzy match only counts when the best edit similarity against
        any single token reaches the threshold; its confidence is that
        similarity scaled by the fuzzy multiplier.

        Args:
            document: Normalized text or tokens
            vocabulary: Candidate skill names
            fuzzy_threshold: Overrides the extractor's threshold for this call

        Returns:
            Mapping of skill name to confidence in (0, 1]
        """
        if fuzzy_threshold is None:
            fuzzy_threshold = self.fuzzy_threshold
        self._check_threshold(fuzzy_threshold)

        text = self._prepare_text(document)
        ensure_vocabulary(vocabulary)

        if not text:
            return {}

        skills = self._unique_skills(vocabulary)
        if not skills:
            return {}

        extracted = {}
        unmatched = []
        for name, lowered in skills:
            confidence = self._match_exact(text, lowered)
            if confidence > 0:
                extracted[name] = confidence
            else:
                unmatched.append((name, lowered))

        words = set(text.split())
        fuzzy_count = 0
        for name, lowered in unmatched:
            best = self._best_fuzzy_similarity(lowered, words, fuzzy_threshold)
            if best >= fuzzy_threshold:
                extracted[name] = best * self.fuzzy_multiplier
                fuzzy_count += 1

        logger.debug(
            f"Extracted {len(extracted)} of {len(skills)} skills "
            f"({len(extracted) - fuzzy_count} exact/substring, {fuzzy_count} fuzzy)"
        )
        return extracted

    def extract_matches(
        self,
        document: Union[str, Sequence[str]],
        vocabulary: Iterable[str],
        fuzzy_threshold: Optional[float] = None
    ) -> List[SkillMatch]:
        """Extract skills as SkillMatch records, highest confidence first."""
        extracted = self.extract(document, vocabulary, fuzzy_threshold)
        matches = [SkillMatch(name, confidence) for name, confidence in extracted.items()]
        matches.sort(key=lambda m: (-m.confidence, m.name.lower()))
        return matches


_default_extractor = SkillExtractor()


def extract_skills(
    text: Union[str, Sequence[str]],
    vocabulary: Iterable[str],
    fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD
) -> Dict[str, float]:
    """Extract skills from normalized text using the default confidences."""
    return _default_extractor.extract(text, vocabulary, fuzzy_threshold)
