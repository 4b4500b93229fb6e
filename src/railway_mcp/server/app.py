"""MCP server assembly.

Builds the FastMCP server and registers only the tools the active filter
admits. Rejected tools are left out of the server entirely; clients never
see them.
"""

from collections.abc import Iterable

from mcp.server.fastmcp import FastMCP

from railway_mcp.config.defaults import SERVER_NAME
from railway_mcp.lib.logging_config import get_logger
from railway_mcp.lib.tool_filter.manager import ToolFilterManager
from railway_mcp.server.bindings import ToolBinding
from railway_mcp.server.tools import build_filter_tools

logger = get_logger(__name__)


def register_tools(
    server: FastMCP,
    bindings: Iterable[ToolBinding],
    manager: ToolFilterManager,
) -> list[str]:
    """Register every binding the filter admits.

    A binding whose name is missing from the tool registry is registered
    only while filtering is disabled; with filtering enabled it can never
    be selected and is skipped with a warning.

    Args:
        server: Server to register tools on.
        bindings: Candidate tools.
        manager: Manager holding the active filter.

    Returns:
        Names of the registered tools, in registration order.
    """
    registered: list[str] = []
    skipped = 0

    for binding in bindings:
        if not manager.should_include(binding.name):
            if not manager.registry.exists(binding.name):
                logger.warning(
                    f"Tool '{binding.name}' is not in the tool registry and "
                    "cannot be selected by the filter"
                )
            logger.debug(f"Skipping filtered tool: {binding.name}")
            skipped += 1
            continue

        server.add_tool(binding.fn, name=binding.name, description=binding.description)
        registered.append(binding.name)
        logger.debug(f"Registered tool: {binding.name}")

    logger.info(f"Registered {len(registered)} tools ({skipped} filtered out)")
    return registered


def create_server(
    manager: ToolFilterManager,
    extra_bindings: Iterable[ToolBinding] = (),
) -> FastMCP:
    """Create the MCP server with all admitted tools registered.

    Args:
        manager: Manager holding the active filter.
        extra_bindings: Additional tools to offer to the filter.

    Returns:
        A configured FastMCP server, ready to run.
    """
    server = FastMCP(SERVER_NAME)
    bindings = [*build_filter_tools(manager), *extra_bindings]
    register_tools(server, bindings, manager)
    return server
