"""Tests for environment variable loading."""

from pathlib import Path

import pytest

from railway_mcp.config.defaults import TOOLS_FILTER_ENV_VAR
from railway_mcp.config.env_loader import (
    get_env_var,
    load_env_file,
    read_tool_filter_setting,
)
from railway_mcp.lib.errors import ConfigError


class TestGetEnvVar:
    """Tests for get_env_var."""

    def test_reads_mapping(self) -> None:
        """Test reading from an explicit mapping."""
        assert get_env_var("A", environ={"A": "1"}) == "1"
        assert get_env_var("B", default="x", environ={}) == "x"

    def test_reads_process_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the default source is os.environ."""
        monkeypatch.setenv("RAILWAY_TEST_VAR", "value")
        assert get_env_var("RAILWAY_TEST_VAR") == "value"


class TestLoadEnvFile:
    """Tests for load_env_file."""

    def test_loads_values(self, temp_env_file: Path) -> None:
        """Test reading key/value pairs."""
        temp_env_file.write_text(
            f'{TOOLS_FILTER_ENV_VAR}="simple,project_delete"\nOTHER=1\n'
        )

        values = load_env_file(temp_env_file)

        assert values[TOOLS_FILTER_ENV_VAR] == "simple,project_delete"
        assert values["OTHER"] == "1"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Test that a missing file is a configuration error."""
        with pytest.raises(ConfigError, match="not found"):
            load_env_file(tmp_path / "missing.env")


class TestReadToolFilterSetting:
    """Tests for filter setting precedence."""

    def test_cli_value_wins(self, temp_env_file: Path) -> None:
        """Test that the command line overrides every other source."""
        temp_env_file.write_text(f"{TOOLS_FILTER_ENV_VAR}=data\n")

        value = read_tool_filter_setting(
            cli_value="pro",
            environ={TOOLS_FILTER_ENV_VAR: "simple"},
            env_file=temp_env_file,
        )

        assert value == "pro"

    def test_empty_cli_value_is_respected(self) -> None:
        """Test that an explicit empty filter disables filtering."""
        value = read_tool_filter_setting(
            cli_value="", environ={TOOLS_FILTER_ENV_VAR: "simple"}
        )
        assert value == ""

    def test_environment_before_env_file(self, temp_env_file: Path) -> None:
        """Test that the process environment overrides the .env file."""
        temp_env_file.write_text(f"{TOOLS_FILTER_ENV_VAR}=data\n")

        value = read_tool_filter_setting(
            environ={TOOLS_FILTER_ENV_VAR: "simple"}, env_file=temp_env_file
        )

        assert value == "simple"

    def test_env_file_fallback(self, temp_env_file: Path) -> None:
        """Test reading from the .env file when the variable is unset."""
        temp_env_file.write_text(f"{TOOLS_FILTER_ENV_VAR}=monitoring,simple\n")

        value = read_tool_filter_setting(environ={}, env_file=temp_env_file)

        assert value == "monitoring,simple"

    def test_unset(self) -> None:
        """Test that no source yields None."""
        assert read_tool_filter_setting(environ={}) is None
