"""
Input validation helpers shared by the scoring components.
"""
from typing import Any, Iterable, Sequence, Union


def ensure_document(value: Any, name: str = "text") -> Union[str, Sequence[str]]:
    """
    Reject a missing document.

    Empty strings and empty token sequences are valid and pass through.

    Args:
        value: Normalized text or a sequence of tokens
        name: Argument name used in the error message

    Returns:
        The value unchanged
    """
    if value is None:
        raise ValueError(f"{name} is required")

    if isinstance(value, bytes):
        raise TypeError(f"{name} must be decoded text, not bytes")

    if not isinstance(value, (str, list, tuple)):
        raise TypeError(f"{name} must be a string or a sequence of tokens")

    return value


def ensure_vocabulary(value: Any, name: str = "vocabulary") -> Iterable[str]:
    """Reject a missing skill vocabulary or a bare string posing as one."""
    if value is None:
        raise ValueError(f"{name} is required")

    if isinstance(value, (str, bytes)):
        raise TypeError(f"{name} must be a collection of skill names, not a string")

    return value


def ensure_probability(value: float, name: str) -> float:
    """Check that a score lies in [0, 1]."""
    if value is None:
        raise ValueError(f"{name} is required")

    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be in [0, 1], got {value}")

    return float(value)


def ensure_skill_counts(matching: int, total: int) -> None:
    """Check skill counts before computing an overlap ratio."""
    if matching is None or total is None:
        raise ValueError("skill counts are required")

    if matching < 0 or total < 0:
        raise ValueError(f"skill counts must be non-negative, got {matching}/{total}")

    if total > 0 and matching > total:
        raise ValueError(f"matching skills ({matching}) exceed required skills ({total})")
