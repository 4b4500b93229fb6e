"""Tests for custom exception hierarchy in railway_mcp.lib.errors."""

import pytest

from railway_mcp.lib.errors import (
    ConfigError,
    RailwayMCPError,
    ToolRegistryError,
    UnknownCategoryError,
)


class TestRailwayMCPError:
    """Tests for base RailwayMCPError exception."""

    def test_creates_with_message(self) -> None:
        """Test that RailwayMCPError can be created with a message."""
        error = RailwayMCPError("Test error message")
        assert str(error) == "Test error message"
        assert isinstance(error, Exception)


class TestConfigError:
    """Tests for ConfigError exception."""

    def test_formats_message_with_field(self) -> None:
        """Test that ConfigError formats messages with field information."""
        error = ConfigError("env_file", "Environment file not found")

        assert str(error) == (
            "Configuration error in 'env_file': Environment file not found"
        )
        assert error.field == "env_file"
        assert isinstance(error, RailwayMCPError)


class TestToolRegistryError:
    """Tests for ToolRegistryError exception."""

    def test_default_field(self) -> None:
        """Test the default field name."""
        error = ToolRegistryError("Duplicate tool identifier: 'x'")

        assert error.field == "tool_registry"
        assert "Duplicate tool identifier" in str(error)
        assert isinstance(error, ConfigError)

    def test_custom_field(self) -> None:
        """Test pointing the error at a specific preset."""
        error = ToolRegistryError("bad", field="presets.extra-simple")
        assert "presets.extra-simple" in str(error)


class TestUnknownCategoryError:
    """Tests for UnknownCategoryError exception."""

    def test_message_and_category(self) -> None:
        """Test that the message names the category without extra quoting."""
        error = UnknownCategoryError("simpl")

        assert error.category == "simpl"
        assert str(error) == "Unknown tool category: 'simpl'"

    def test_is_key_error(self) -> None:
        """Test that callers can catch it as a KeyError."""
        with pytest.raises(KeyError):
            raise UnknownCategoryError("nope")
        assert issubclass(UnknownCategoryError, RailwayMCPError)
