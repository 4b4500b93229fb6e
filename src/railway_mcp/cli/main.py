"""Entry point for the ``railway-mcp`` command."""

import click

from railway_mcp import __version__
from railway_mcp.cli.commands.filter import filter_group
from railway_mcp.cli.commands.serve import serve


@click.group()
@click.version_option(version=__version__, prog_name="railway-mcp")
def main() -> None:
    """Railway MCP server.

    Run the MCP server over stdio, or inspect and test tool filters.
    Set RAILWAY_TOOLS_FILTER to choose which tools the server exposes.
    """
    pass


main.add_command(serve)
main.add_command(filter_group)


if __name__ == "__main__":
    main()
