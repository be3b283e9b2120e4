"""
Tests for match scoring.
"""

import pytest
from preprocessing.normalizer import normalize_to_string
from scoring.models import MatchResult
from scoring.scorer import (
    MatchScorer,
    combine,
    compare_skills,
    match_percentage,
    skill_ratio,
)
from scoring.similarity import cosine_similarity


class TestCombine:
    """Test the weighted combination."""

    def test_weighting_example(self):
        """Half similarity and half the skills give 50%."""
        assert combine(0.5, 2, 4) == 50.0

    def test_similarity_only(self):
        """Without required skills only similarity counts."""
        assert combine(1.0, 0, 0) == 60.0

    def test_skills_only(self):
        """All skills and no similarity give 40%."""
        assert combine(0.0, 3, 3) == 40.0

    def test_zero(self):
        """Nothing in common gives 0%."""
        assert combine(0.0, 0, 0) == 0.0

    def test_rounded_to_two_decimals(self):
        """Percentages carry two decimals."""
        assert combine(0.0, 1, 3) == 13.33

    def test_skill_ratio(self):
        """Ratio guards against zero required skills."""
        assert skill_ratio(2, 4) == 0.5
        assert skill_ratio(0, 0) == 0.0

    @pytest.mark.parametrize("similarity,matching,total", [
        (1.5, 0, 0),
        (-0.1, 0, 0),
        (0.5, -1, 3),
        (0.5, 4, 3),
        (None, 1, 1),
    ])
    def test_invalid_input(self, similarity, matching, total):
        """Out-of-range arguments are rejected."""
        with pytest.raises(ValueError):
            combine(similarity, matching, total)

    def test_custom_weights(self):
        """Weights are injected at construction."""
        scorer = MatchScorer(similarity_weight=1.0, skill_weight=0.0)
        assert scorer.combine(0.25, 1, 1) == 25.0


class TestMatchPercentage:
    """Test similarity plus skills on normalized text."""

    def test_end_to_end_example(self):
        """Resume/job example combines cosine with a 2/3 skill ratio."""
        resume = "python sql azure docker"
        job = "python azure kubernetes"

        cosine = cosine_similarity(resume, job)
        expected = round((cosine * 0.6 + (2 / 3) * 0.4) * 100, 2)

        assert match_percentage(resume, job, 2, 3) == expected
        assert expected == pytest.approx(86.67)

    def test_empty_text(self):
        """Empty text leaves only the skill share."""
        assert match_percentage("", "python azure", 1, 2) == 20.0


class TestCompareSkills:
    """Test matching and missing skill lists."""

    def test_intersection_and_difference(self):
        """Comparison ignores case and keeps each side's casing."""
        matching, missing = compare_skills(
            ["Python", "SQL", "Azure", "docker"],
            ["python", "azure", "Kubernetes"]
        )
        assert matching == ["Python", "Azure"]
        assert missing == ["Kubernetes"]

    def test_duplicates_counted_once(self):
        """Case-insensitive duplicates collapse."""
        matching, missing = compare_skills(["SQL", "sql"], ["sql", "SQL", "Go"])
        assert matching == ["SQL"]
        assert missing == ["Go"]

    def test_empty_inputs(self):
        """No required skills means nothing matches or is missing."""
        assert compare_skills(["Python"], []) == ([], [])
        assert compare_skills([], ["Python"]) == ([], ["Python"])

    def test_missing_input_rejected(self):
        """None is invalid input."""
        with pytest.raises(ValueError):
            compare_skills(None, ["Python"])


class TestMatchScorer:
    """Test end-to-end scoring of raw text."""

    def test_score_extracts_job_skills(self, resume_text, job_text, skill_vocabulary):
        """Job skills come from the job text when not given."""
        result = MatchScorer().score(resume_text, job_text, skill_vocabulary)

        assert isinstance(result, MatchResult)
        assert result.matching_skills == ["Python", "Azure"]
        assert result.missing_skills == ["Kubernetes"]
        assert result.skill_match_ratio == pytest.approx(2 / 3)
        assert result.skill_match_score == 66.67
        assert set(result.resume_skills) == {"Python", "SQL", "Azure", "Docker"}

    def test_score_is_consistent_with_components(self, resume_text, job_text, skill_vocabulary):
        """The percentage combines the reported similarity and skill counts."""
        result = MatchScorer().score(resume_text, job_text, skill_vocabulary)

        expected_similarity = cosine_similarity(
            normalize_to_string(resume_text),
            normalize_to_string(job_text)
        )
        assert result.similarity == pytest.approx(expected_similarity)
        assert result.match_percentage == combine(result.similarity, 2, 3)
        assert 0.0 <= result.match_percentage <= 100.0

    def test_score_with_required_skills(self, resume_text, job_text, skill_vocabulary):
        """Explicit requirements replace extraction from the job text."""
        result = MatchScorer().score(
            resume_text,
            job_text,
            skill_vocabulary,
            required_skills=["python", "Terraform", "PYTHON"]
        )
        assert result.matching_skills == ["Python"]
        assert result.missing_skills == ["Terraform"]
        assert result.total_required_skills == 2

    def test_required_skill_outside_vocabulary(self, job_text):
        """Required skills are searched for even when not in the vocabulary."""
        result = MatchScorer().score(
            "Terraform and Python",
            job_text,
            [],
            required_skills=["Terraform"]
        )
        assert result.matching_skills == ["Terraform"]
        assert result.missing_skills == []

    def test_empty_resume(self, job_text, skill_vocabulary):
        """An empty resume scores zero."""
        result = MatchScorer().score("", job_text, skill_vocabulary)
        assert result.similarity == 0.0
        assert result.matching_skills == []
        assert result.match_percentage == 0.0

    def test_missing_vocabulary_rejected(self, resume_text, job_text):
        """A missing vocabulary is invalid input."""
        with pytest.raises(ValueError):
            MatchScorer().score(resume_text, job_text, None)

    def test_uses_config(self, config):
        """Config settings reach the skill extractor."""
        config.fuzzy_threshold = 0.95
        scorer = MatchScorer(config)
        assert scorer.extractor.fuzzy_threshold == 0.95
        assert scorer.weights == {'text_similarity': 0.6, 'skill_overlap': 0.4}

    def test_to_dict(self, resume_text, job_text, skill_vocabulary):
        """Serialized results include derived counts."""
        data = MatchScorer().score(resume_text, job_text, skill_vocabulary).to_dict()
        assert data["matching_skills_count"] == 2
        assert data["total_required_skills"] == 3
        assert data["skill_match_score"] == 66.67
        assert "match_percentage" in data


class TestTopKeywords:
    """Test TF-IDF keyword extraction."""

    def test_most_frequent_term_first(self):
        """The dominant term ranks first."""
        keywords = MatchScorer().extract_top_keywords("python python python sql", 1)
        assert keywords == ["python"]

    def test_empty_text(self):
        """Empty text has no keywords."""
        assert MatchScorer().extract_top_keywords("", 3) == []

    def test_only_english_stop_words(self):
        """Text made only of English stop words has no keywords."""
        assert MatchScorer().extract_top_keywords("about above across", 3) == []
