"""
Skill list sanitization utilities.
"""
import re
from typing import Iterable, List, Optional


_SKILL_SEPARATORS = re.compile(r'[,;\n]')


def dedupe_skills(skills: Iterable[Optional[str]]) -> List[str]:
    """
    Drop blank entries and case-insensitive duplicates.

    The first occurrence of each skill keeps its casing and position.

    Args:
        skills: Skill names in caller order

    Returns:
        Trimmed, de-duplicated skill names
    """
    seen = set()
    result = []

    for skill in skills:
        if skill is None:
            continue

        name = str(skill).strip()
        if not name:
            continue

        key = name.lower()
        if key in seen:
            continue

        seen.add(key)
        result.append(name)

    return result


def parse_skill_list(raw: Optional[str]) -> List[str]:
    """
    Parse a recruiter-entered list of required skills.

    Args:
        raw: Skills separated by commas, semicolons or newlines

    Returns:
        Trimmed, de-duplicated skill names
    """
    if not raw or not raw.strip():
        return []

    return dedupe_skills(_SKILL_SEPARATORS.split(raw))
