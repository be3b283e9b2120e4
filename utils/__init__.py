# utils/__init__.py
"""Utility modules."""
from .config import Config
from .logging_config import setup_logging
from .sanitizers import dedupe_skills, parse_skill_list
from .file_helpers import read_text_file, load_skill_vocabulary

__all__ = [
    'Config',
    'setup_logging',
    'dedupe_skills',
    'parse_skill_list',
    'read_text_file',
    'load_skill_vocabulary'
]
