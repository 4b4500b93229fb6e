"""CLI command for running the MCP server.

Implements the 'railway-mcp serve' command. The tool filter is read once
here and passed explicitly to the server bootstrap.
"""

import sys

import click

from railway_mcp.config.defaults import API_TOKEN_ENV_VAR
from railway_mcp.config.env_loader import get_env_var, read_tool_filter_setting
from railway_mcp.lib.errors import RailwayMCPError
from railway_mcp.lib.logging_config import get_logger, setup_logging
from railway_mcp.lib.tool_filter.manager import ToolFilterManager
from railway_mcp.server.app import create_server

logger = get_logger(__name__)


@click.command()
@click.option(
    "--filter",
    "filter_string",
    type=str,
    default=None,
    help="Tool filter string (overrides RAILWAY_TOOLS_FILTER)",
)
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read RAILWAY_TOOLS_FILTER from a .env file if unset in the environment",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--quiet", "-q", is_flag=True, help="Only log warnings and errors")
def serve(
    filter_string: str | None,
    env_file: str | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Start the MCP server on stdio.

    \b
    EXAMPLES:

        Expose every tool:
            railway-mcp serve

        Expose basic tools plus project deletion:
            railway-mcp serve --filter simple,project_delete
    """
    setup_logging(verbose=verbose, quiet=quiet)

    try:
        resolved = read_tool_filter_setting(cli_value=filter_string, env_file=env_file)
        manager = ToolFilterManager(resolved)
        manager.log_filter_status()

        if not get_env_var(API_TOKEN_ENV_VAR):
            logger.warning(
                f"{API_TOKEN_ENV_VAR} is not set; Railway API calls will fail "
                "until a token is configured"
            )

        server = create_server(manager)
        logger.info("Starting MCP server on stdio")
        server.run(transport="stdio")

    except RailwayMCPError as e:
        logger.error(f"Startup failed: {e}", exc_info=True)
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Server interrupted by user (Ctrl+C)")
        sys.exit(130)
