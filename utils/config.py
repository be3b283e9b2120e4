"""
Configuration management module.
"""
import os
import yaml
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


# Closed list of English function words dropped during normalization
STOP_WORDS = frozenset([
    "a", "an", "and", "are", "as", "at", "be", "by", "for", "from",
    "has", "he", "in", "is", "it", "its", "of", "on", "that", "the",
    "to", "was", "will", "with", "this", "but", "they", "have",
    "had", "what", "said", "each", "which", "their", "time", "if",
    "up", "out", "many", "then", "them", "these", "so", "some", "her",
    "would", "make", "like", "into", "him", "two", "more",
    "very", "after", "words", "long", "than", "first", "been", "call",
    "who", "oil", "sit", "now", "find", "down", "day", "did", "get",
    "come", "made", "may", "part", "i", "we", "you", "she", "do",
    "can", "could", "should", "might", "must",
])

# Fixed scoring policy
SIMILARITY_WEIGHT = 0.6
SKILL_WEIGHT = 0.4

EXACT_MATCH_CONFIDENCE = 1.0
SUBSTRING_MATCH_CONFIDENCE = 0.7
FUZZY_CONFIDENCE_MULTIPLIER = 0.6
DEFAULT_FUZZY_THRESHOLD = 0.8

# Only a resume and a job description are ever compared
DOCUMENT_COUNT = 2


def _as_number(value, cast, name: str):
    """Cast a setting read from file or environment, as ValueError on failure."""
    try:
        return cast(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {value!r}") from None


class Config:
    """Application configuration."""

    def __init__(self, config_path: str = "config.yaml"):
        """
        Initialize configuration from YAML file or defaults.

        Args:
            config_path: Path to config YAML file
        """
        # Tunable settings
        self.fuzzy_threshold = DEFAULT_FUZZY_THRESHOLD
        self.skill_vocabulary = [
            "python", "javascript", "react", "sql", "azure",
            "machine learning", "aws", "docker", "kubernetes"
        ]
        self.top_keywords = 5
        self.max_file_size_mb = 10
        self.log_level = "INFO"

        # Policy constants, never read from file or environment
        self.stop_words = STOP_WORDS
        self.similarity_weight = SIMILARITY_WEIGHT
        self.skill_weight = SKILL_WEIGHT
        self.exact_match_confidence = EXACT_MATCH_CONFIDENCE
        self.substring_match_confidence = SUBSTRING_MATCH_CONFIDENCE
        self.fuzzy_confidence_multiplier = FUZZY_CONFIDENCE_MULTIPLIER

        if config_path and os.path.exists(config_path):
            try:
                with open(config_path, 'r', encoding='utf-8') as f:
                    config_data = yaml.safe_load(f)
                self._load_from_dict(config_data)
                logger.info(f"Configuration loaded from {config_path}")
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config from {config_path}: {str(e)}")
        else:
            logger.info("Using default configuration")

        # Override with environment variables
        self._load_from_env()
        self.validate()

    def _load_from_dict(self, config_data: Optional[dict]) -> None:
        """Load configuration from dictionary."""
        if not config_data:
            return

        if not isinstance(config_data, dict):
            logger.warning("Config file does not contain a mapping, ignoring it")
            return

        self.fuzzy_threshold = _as_number(
            config_data.get('fuzzy_threshold', self.fuzzy_threshold), float, 'fuzzy_threshold'
        )
        self.skill_vocabulary = config_data.get('skill_vocabulary', self.skill_vocabulary)
        self.top_keywords = _as_number(
            config_data.get('top_keywords', self.top_keywords), int, 'top_keywords'
        )
        self.max_file_size_mb = _as_number(
            config_data.get('max_file_size_mb', self.max_file_size_mb), int, 'max_file_size_mb'
        )
        self.log_level = config_data.get('log_level', self.log_level)

    def _load_from_env(self) -> None:
        """Load configuration from environment variables."""
        if os.getenv('FUZZY_THRESHOLD'):
            self.fuzzy_threshold = _as_number(os.getenv('FUZZY_THRESHOLD'), float, 'FUZZY_THRESHOLD')

        if os.getenv('TOP_KEYWORDS'):
            self.top_keywords = _as_number(os.getenv('TOP_KEYWORDS'), int, 'TOP_KEYWORDS')

        if os.getenv('MAX_FILE_SIZE_MB'):
            self.max_file_size_mb = _as_number(os.getenv('MAX_FILE_SIZE_MB'), int, 'MAX_FILE_SIZE_MB')

        if os.getenv('LOG_LEVEL'):
            self.log_level = os.getenv('LOG_LEVEL')

    def validate(self) -> None:
        """Reject settings the scoring engine cannot work with."""
        if not 0.0 < self.fuzzy_threshold <= 1.0:
            raise ValueError(f"fuzzy_threshold must be in (0, 1], got {self.fuzzy_threshold}")

        if self.top_keywords <= 0:
            raise ValueError(f"top_keywords must be positive, got {self.top_keywords}")

        if self.max_file_size_mb <= 0:
            raise ValueError(f"max_file_size_mb must be positive, got {self.max_file_size_mb}")

        if isinstance(self.skill_vocabulary, str) or not isinstance(self.skill_vocabulary, list):
            raise ValueError("skill_vocabulary must be a list of skill names")

    @property
    def vocabulary(self) -> List[str]:
        """Configured skill vocabulary with blanks removed."""
        return [str(s) for s in self.skill_vocabulary if s is not None and str(s).strip()]
