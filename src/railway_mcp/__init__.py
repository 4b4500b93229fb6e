"""Railway MCP - Model Context Protocol server for the Railway platform.

Exposes Railway platform operations as MCP tools. Operators choose which
tools a server instance registers with the RAILWAY_TOOLS_FILTER setting,
a comma-separated list of category presets and tool names.

Main features:
- Tool registry with complexity tiers and use-case tags
- Category presets derived from the registry
- Fail-open filter parsing with validation and suggestions
- Diagnostic tools for inspecting the active filter
"""

from railway_mcp.lib.errors import ConfigError, RailwayMCPError, ToolRegistryError
from railway_mcp.lib.tool_filter import ToolFilterManager, parse_tool_filter

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConfigError",
    "RailwayMCPError",
    "ToolFilterManager",
    "ToolRegistryError",
    "parse_tool_filter",
]
