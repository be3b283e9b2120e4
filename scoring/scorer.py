"""
Match scoring module.
Combines TF-IDF text similarity with required-skill overlap into a single
match percentage and reports which required skills a resume covers.
"""
import logging
from typing import Iterable, List, Optional, Tuple

from sklearn.feature_extraction.text import TfidfVectorizer

from extractors.skill_extractor import SkillExtractor
from preprocessing.normalizer import TextNormalizer
from scoring.models import MatchResult
from scoring.similarity import Document, TfidfSimilarity
from utils.config import SIMILARITY_WEIGHT, SKILL_WEIGHT
from utils.sanitizers import dedupe_skills
from utils.validators import ensure_probability, ensure_skill_counts, ensure_vocabulary

logger = logging.getLogger(__name__)


def skill_ratio(matching_count: int, total_count: int) -> float:
    """Share of required skills that matched; 0.0 when none are required."""
    ensure_skill_counts(matching_count, total_count)
    if total_count == 0:
        return 0.0
    return matching_count / total_count


def compare_skills(
    resume_skills: Iterable[str],
    job_skills: Iterable[str]
) -> Tuple[List[str], List[str]]:
    """
    Case-insensitive intersection and difference of skill names.

    Args:
        resume_skills: Skill names found in the resume
        job_skills: Skill names the job requires

    Returns:
        Tuple of (matching, missing). Matching names keep the resume's
        casing and order; missing names keep the job's.
    """
    ensure_vocabulary(resume_skills, "resume_skills")
    ensure_vocabulary(job_skills, "job_skills")

    resume_unique = dedupe_skills(resume_skills)
    job_unique = dedupe_skills(job_skills)

    resume_keys = {s.lower() for s in resume_unique}
    job_keys = {s.lower() for s in job_unique}

    matching = [s for s in resume_unique if s.lower() in job_keys]
    missing = [s for s in job_unique if s.lower() not in resume_keys]

    return matching, missing


class MatchScorer:
    """
    Score a resume against a job description:
    1. TF-IDF cosine similarity of the normalized texts
    2. Coverage of the job's required skills
    """

    def __init__(
        self,
        config=None,
        normalizer: Optional[TextNormalizer] = None,
        extractor: Optional[SkillExtractor] = None,
        similarity: Optional[TfidfSimilarity] = None,
        similarity_weight: float = SIMILARITY_WEIGHT,
        skill_weight: float = SKILL_WEIGHT
    ):
        self.config = config

        if normalizer is None:
            stop_words = config.stop_words if config is not None else None
            normalizer = TextNormalizer(stop_words)
        if extractor is None:
            if config is not None:
                extractor = SkillExtractor(
                    fuzzy_threshold=config.fuzzy_threshold,
                    exact_confidence=config.exact_match_confidence,
                    substring_confidence=config.substring_match_confidence,
                    fuzzy_multiplier=config.fuzzy_confidence_multiplier
                )
            else:
                extractor = SkillExtractor()

        self.normalizer = normalizer
        self.extractor = extractor
        self.similarity = similarity or TfidfSimilarity()

        self.weights = {
            'text_similarity': similarity_weight,
            'skill_overlap': skill_weight
        }

    def combine(self, similarity: float, matching_count: int, total_count: int) -> float:
        """
        Weighted match percentage, rounded to two decimals.

        Args:
            similarity: Text similarity in [0, 1]
            matching_count: Required skills found in the resume
            total_count: Required skills in the job

        Returns:
            Percentage in [0, 100]
        """
        similarity = ensure_probability(similarity, "similarity")
        ratio = skill_ratio(matching_count, total_count)

        combined = (
            similarity * self.weights['text_similarity'] +
            ratio * self.weights['skill_overlap']
        )
        return round(combined * 100, 2)

    def match_percentage(
        self,
        text_a: Document,
        text_b: Document,
        matching_count: int,
        total_count: int
    ) -> float:
        """Match percentage of two normalized texts given skill counts."""
        similarity = self.similarity.cosine_similarity(text_a, text_b)
        return self.combine(similarity, matching_count, total_count)

    def score(
        self,
        resume_text: str,
        job_text: str,
        skill_vocabulary: Iterable[str],
        required_skills: Optional[Iterable[str]] = None
    ) -> MatchResult:
        """
        Score raw resume text against a raw job description.

        Args:
            resume_text: Resume plain text
            job_text: Job description plain text
            skill_vocabulary: Known skill names to look for
            required_skills: Explicit job requirements; extracted from
                the job text when omitted

        Returns:
            MatchResult with percentage, similarity and skill lists
        """
        ensure_vocabulary(skill_vocabulary, "skill_vocabulary")
        vocabulary = list(skill_vocabulary)

        resume_tokens = self.normalizer.normalize(resume_text)
        job_tokens = self.normalizer.normalize(job_text)

        if required_skills is None:
            job_skills = list(self.extractor.extract(job_tokens, vocabulary))
        else:
            ensure_vocabulary(required_skills, "required_skills")
            job_skills = dedupe_skills(required_skills)
            vocabulary = vocabulary + job_skills

        resume_skills = self.extractor.extract(resume_tokens, vocabulary)

        similarity = self.similarity.cosine_similarity(resume_tokens, job_tokens)
        matching, missing = compare_skills(resume_skills.keys(), job_skills)

        total = len(matching) + len(missing)
        percentage = self.combine(similarity, len(matching), total)

        logger.info(
            f"Scored resume: {percentage}% (similarity={similarity:.4f}, "
            f"skills={len(matching)}/{total})"
        )

        return MatchResult(
            match_percentage=percentage,
            similarity=similarity,
            matching_skills=matching,
            missing_skills=missing,
            skill_match_ratio=skill_ratio(len(matching), total),
            resume_skills=resume_skills
        )

    def extract_top_keywords(self, text: str, n_keywords: int = 5) -> List[str]:
        """Extract top keywords of a single document using TF-IDF."""
        tokens = self.normalizer.normalize(text)
        if not tokens:
            return []

        try:
            vectorizer = TfidfVectorizer(
                max_features=5000,
                stop_words='english',
                ngram_range=(1, 2)
            )
            tfidf_matrix = vectorizer.fit_transform([' '.join(tokens)])
        except ValueError as e:
            # Raised when every token is an English stop word
            logger.warning(f"TF-IDF keyword extraction failed: {str(e)}")
            return []

        feature_names = vectorizer.get_feature_names_out()
        tfidf_scores = tfidf_matrix.toarray()[0]
        top_indices = tfidf_scores.argsort()[-n_keywords:][::-1]
        return [str(feature_names[i]) for i in top_indices if tfidf_scores[i] > 0]


_default_scorer = MatchScorer()


def combine(similarity: float, matching_count: int, total_count: int) -> float:
    """Match percentage with the fixed 0.6 / 0.4 weighting."""
    return _default_scorer.combine(similarity, matching_count, total_count)


def match_percentage(text_a: Document, text_b: Document, matching_count: int, total_count: int) -> float:
    """Match percentage of two normalized texts with the default scorer."""
    return _default_scorer.match_percentage(text_a, text_b, matching_count, total_count)
