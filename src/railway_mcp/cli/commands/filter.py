"""Click commands for inspecting tool filters.

This module implements the 'railway-mcp filter' command group with
subcommands for validating filter strings, listing categories, showing
examples, and showing the filter the server would apply.
"""

import json
import sys
from typing import Any

import click

from railway_mcp.config.defaults import TOOLS_FILTER_ENV_VAR, get_filter_examples
from railway_mcp.config.env_loader import read_tool_filter_setting
from railway_mcp.lib.errors import RailwayMCPError
from railway_mcp.lib.logging_config import setup_logging
from railway_mcp.lib.tool_filter.gate import get_filter_stats
from railway_mcp.lib.tool_filter.manager import ToolFilterManager


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2))


@click.group(name="filter")
def filter_group() -> None:
    """Inspect and test tool filters.

    A filter is a comma-separated list of category presets and tool names,
    read from RAILWAY_TOOLS_FILTER when the server starts.

    \b
    EXAMPLES:

        Check a filter before using it:
            railway-mcp filter validate simple,project_delete

        List categories:
            railway-mcp filter categories

        Show what the server would expose:
            railway-mcp filter show
    """
    setup_logging(quiet=True)


@filter_group.command(name="validate")
@click.argument("filter_string", metavar="FILTER")
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON")
def validate_cmd(filter_string: str, as_json: bool) -> None:
    """Validate FILTER and list the tools it enables.

    Exits with status 1 if no entry in FILTER is recognized.
    """
    manager = ToolFilterManager(None)
    validation = manager.validate(filter_string)
    config = manager.preview(filter_string)

    if as_json:
        _echo_json(
            {
                **validation.model_dump(),
                "enabled_tools": config.sorted_tools() if validation.valid else [],
            }
        )
    elif validation.valid:
        click.secho("Valid filter configuration", fg="green")
        click.echo(get_filter_stats(config, manager.registry))
        for error in validation.errors:
            click.secho(f"  warning: {error}", fg="yellow")
        for suggestion in validation.suggestions:
            click.echo(f"  hint: {suggestion}")
        click.echo(f"Enabled tools: {', '.join(config.sorted_tools())}")
    else:
        click.secho("Invalid filter configuration", fg="red", err=True)
        for error in validation.errors:
            click.echo(f"  • {error}", err=True)
        for suggestion in validation.suggestions:
            click.echo(f"  • {suggestion}", err=True)

    if not validation.valid:
        sys.exit(1)


@filter_group.command(name="categories")
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON")
def categories_cmd(as_json: bool) -> None:
    """List category presets and their tools."""
    categories = ToolFilterManager(None).describe_categories()

    if as_json:
        _echo_json(categories)
        return

    for name, info in categories.items():
        click.secho(f"{name} ({info['tool_count']} tools)", bold=True)
        click.echo(f"  {info['description']}")


@filter_group.command(name="examples")
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON")
def examples_cmd(as_json: bool) -> None:
    """Show example filter strings."""
    examples = get_filter_examples()

    if as_json:
        _echo_json(examples)
        return

    for use_case, filter_string in examples.items():
        click.echo(f"{use_case}: {TOOLS_FILTER_ENV_VAR}={filter_string}")


@filter_group.command(name="show")
@click.option(
    "--filter",
    "filter_string",
    type=str,
    default=None,
    help="Filter string to show (defaults to RAILWAY_TOOLS_FILTER)",
)
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read RAILWAY_TOOLS_FILTER from a .env file if unset in the environment",
)
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON")
def show_cmd(filter_string: str | None, env_file: str | None, as_json: bool) -> None:
    """Show the filter the server would apply and the tools it enables."""
    try:
        resolved = read_tool_filter_setting(cli_value=filter_string, env_file=env_file)
    except RailwayMCPError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    current = ToolFilterManager(resolved).get_current()

    if as_json:
        _echo_json(current)
        return

    click.echo(current["stats"])
    if current["enabled"]:
        click.echo(f"Filter string: {current['filter_string']}")
    if current["unrecognized"]:
        click.secho(
            f"Unrecognized: {', '.join(current['unrecognized'])}",
            fg="yellow",
        )
    click.echo(f"Enabled tools ({current['total_enabled']}):")
    for tool in current["enabled_tools"]:
        click.echo(f"  {tool}")
