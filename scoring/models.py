"""
Value types produced by the scoring engine.
"""
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List


@dataclass(frozen=True)
class SkillMatch:
    """A skill found in a document and how confident the match is."""
    name: str
    confidence: float


@dataclass
class MatchResult:
    """Outcome of scoring one resume against one job description."""
    match_percentage: float
    similarity: float
    matching_skills: List[str] = field(default_factory=list)
    missing_skills: List[str] = field(default_factory=list)
    skill_match_ratio: float = 0.0
    resume_skills: Dict[str, float] = field(default_factory=dict)

    @property
    def matching_skills_count(self) -> int:
        return len(self.matching_skills)

    @property
    def total_required_skills(self) -> int:
        return len(self.matching_skills) + len(self.missing_skills)

    @property
    def skill_match_score(self) -> float:
        """Skill overlap as a percentage."""
        return round(self.skill_match_ratio * 100, 2)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['matching_skills_count'] = self.matching_skills_count
        data['total_required_skills'] = self.total_required_skills
        data['skill_match_score'] = self.skill_match_score
        return data
