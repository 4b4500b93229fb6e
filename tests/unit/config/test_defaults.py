"""Tests for default configuration values."""

from railway_mcp.config.defaults import FILTER_EXAMPLES, get_filter_examples


class TestGetFilterExamples:
    """Tests for get_filter_examples."""

    def test_contains_documented_audiences(self) -> None:
        """Test that the documented example names are present."""
        examples = get_filter_examples()

        assert examples["Basic users"] == "simple"
        assert examples["Developers"] == "intermediate,deployment"
        assert examples["Enterprise setup"] == "enterprise,team"

    def test_returns_copy(self) -> None:
        """Test that callers cannot modify the shared examples."""
        examples = get_filter_examples()
        examples["Basic users"] = "pro"

        assert FILTER_EXAMPLES["Basic users"] == "simple"
