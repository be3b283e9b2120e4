"""
Plain-text file handling utilities.
"""
from pathlib import Path
from typing import List, Union

from .sanitizers import parse_skill_list


def read_text_file(path: Union[str, Path], max_size_mb: int = 10) -> str:
    """
    Read a UTF-8 text document for scoring.

    Args:
        path: Path to a plain-text file
        max_size_mb: Size limit in megabytes

    Returns:
        File contents
    """
    path = Path(path)

    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    file_size = path.stat().st_size
    max_size = max_size_mb * 1024 * 1024

    if file_size > max_size:
        raise ValueError(f"File too large ({file_size / 1024 / 1024:.1f}MB). Max: {max_size_mb}MB")

    return path.read_text(encoding='utf-8', errors='replace')


def load_skill_vocabulary(path: Union[str, Path]) -> List[str]:
    """
    Load a skill vocabulary file.

    Accepts one skill per line or comma/semicolon separated entries.
    Lines starting with "#" are ignored.
    """
    text = read_text_file(path)
    lines = [line for line in text.splitlines() if not line.lstrip().startswith('#')]

    return parse_skill_list("\n".join(lines))
