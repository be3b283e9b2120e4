"""
Tests for text normalization.
"""

import pytest
from preprocessing.normalizer import TextNormalizer, normalize, normalize_to_string


class TestNormalize:
    """Test the normalization pipeline."""

    def test_strips_punctuation_and_short_tokens(self):
        """Punctuation becomes whitespace and single characters are dropped."""
        assert normalize("Hello, World! I love C# and Python 3.") == [
            "hello", "world", "love", "python"
        ]

    def test_removes_stop_words(self):
        """Common function words are dropped."""
        assert normalize("The candidate is able to code") == ["candidate", "able", "code"]

    def test_preserves_order_and_duplicates(self):
        """Token order and repeats are kept."""
        assert normalize("SQL python SQL") == ["sql", "python", "sql"]

    def test_collapses_whitespace(self):
        """Tabs, newlines and runs of spaces split tokens the same way."""
        assert normalize("python\t\tsql\n\n  azure") == ["python", "sql", "azure"]

    def test_non_ascii_letters_are_separators(self):
        """Only ASCII letters and digits survive."""
        assert normalize("Café résumé") == ["caf", "sum"]

    def test_keeps_digits(self):
        """Multi-digit tokens are kept."""
        assert normalize("Python 3.11 since 2019") == ["python", "11", "since", "2019"]

    @pytest.mark.parametrize("text", ["", "   ", "\n\t", "a an the", "!!! ???"])
    def test_degenerate_input_is_empty(self, text):
        """Empty, blank or all-dropped input yields no tokens."""
        assert normalize(text) == []

    def test_none_is_rejected(self):
        """A missing document is an error, not an empty result."""
        with pytest.raises(ValueError):
            normalize(None)

    def test_idempotent(self):
        """Normalizing normalized text changes nothing."""
        text = "Senior ML-Engineer: PyTorch, AWS & Kubernetes (5+ years)!"
        tokens = normalize(text)
        assert normalize(" ".join(tokens)) == tokens

    def test_normalize_to_string(self):
        """Tokens are joined with single spaces."""
        assert normalize_to_string("  Python,   SQL  ") == "python sql"


class TestTextNormalizer:
    """Test normalizer construction options."""

    def test_custom_stop_words(self):
        """Injected stop words replace the default list."""
        normalizer = TextNormalizer(stop_words=["Python"])
        assert normalizer.normalize("python and sql") == ["and", "sql"]

    def test_default_stop_words_from_config(self, config):
        """The default list is the configured one."""
        assert TextNormalizer().stop_words == config.stop_words
        assert "the" in config.stop_words
