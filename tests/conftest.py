"""
Pytest configuration and shared fixtures.
"""

import pytest
from typing import List

from utils.config import Config


CONFIG_ENV_VARS = ("FUZZY_THRESHOLD", "TOP_KEYWORDS", "MAX_FILE_SIZE_MB", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch):
    """Keep host environment variables out of Config."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config(tmp_path) -> Config:
    """Default configuration with no config file."""
    return Config(str(tmp_path / "missing.yaml"))


@pytest.fixture
def skill_vocabulary() -> List[str]:
    """Small skill dictionary."""
    return ["Python", "SQL", "Azure", "Docker", "Kubernetes"]


@pytest.fixture
def resume_text() -> str:
    """Raw resume text."""
    return "Experienced Python developer with SQL, Azure and Docker."


@pytest.fixture
def job_text() -> str:
    """Raw job description text."""
    return "We need a Python engineer with Azure and Kubernetes experience."
