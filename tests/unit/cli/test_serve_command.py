"""Unit tests for the railway-mcp serve command."""

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from railway_mcp.cli.commands.serve import serve
from railway_mcp.config.defaults import API_TOKEN_ENV_VAR, TOOLS_FILTER_ENV_VAR
from railway_mcp.lib.errors import ToolRegistryError


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture
def mock_create_server() -> Generator[MagicMock, None, None]:
    """Replace the server factory so no transport is started."""
    with (
        patch("railway_mcp.cli.commands.serve.setup_logging"),
        patch("railway_mcp.cli.commands.serve.create_server") as mock,
    ):
        yield mock


class TestServeCommand:
    """Tests for serve command execution."""

    def test_uses_environment_filter(
        self, runner: CliRunner, mock_create_server: MagicMock
    ) -> None:
        """Test that the filter is read from the environment and injected."""
        result = runner.invoke(
            serve,
            [],
            env={TOOLS_FILTER_ENV_VAR: "simple", API_TOKEN_ENV_VAR: "token"},
        )

        assert result.exit_code == 0
        manager = mock_create_server.call_args.args[0]
        assert manager.config.categories == ("simple",)
        mock_create_server.return_value.run.assert_called_once_with(
            transport="stdio"
        )

    def test_option_overrides_environment(
        self, runner: CliRunner, mock_create_server: MagicMock
    ) -> None:
        """Test that --filter wins over RAILWAY_TOOLS_FILTER."""
        result = runner.invoke(
            serve,
            ["--filter", "project_list"],
            env={TOOLS_FILTER_ENV_VAR: "simple"},
        )

        assert result.exit_code == 0
        manager = mock_create_server.call_args.args[0]
        assert manager.config.specific_tools == ("project_list",)

    def test_no_filter(self, runner: CliRunner, mock_create_server: MagicMock) -> None:
        """Test that no filter means filtering is disabled."""
        result = runner.invoke(serve, [], env={TOOLS_FILTER_ENV_VAR: None})

        assert result.exit_code == 0
        manager = mock_create_server.call_args.args[0]
        assert manager.config.enabled is False

    def test_startup_error_exits_with_status_1(
        self, runner: CliRunner, mock_create_server: MagicMock
    ) -> None:
        """Test that registry errors abort startup."""
        mock_create_server.side_effect = ToolRegistryError("Duplicate tool")

        result = runner.invoke(serve, ["--filter", "simple"])

        assert result.exit_code == 1
        assert "Duplicate tool" in result.output

    def test_keyboard_interrupt(
        self, runner: CliRunner, mock_create_server: MagicMock
    ) -> None:
        """Test that Ctrl+C exits with status 130."""
        mock_create_server.return_value.run.side_effect = KeyboardInterrupt

        result = runner.invoke(serve, ["--filter", "simple"])

        assert result.exit_code == 130
