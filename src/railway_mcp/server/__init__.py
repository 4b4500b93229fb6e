"""MCP server surface for the Railway MCP server.

Main components:
- ToolBinding: A candidate tool and its handler
- register_tools: Filter-gated tool registration
- create_server: Build the FastMCP server
"""

from railway_mcp.server.app import create_server, register_tools
from railway_mcp.server.bindings import ToolBinding
from railway_mcp.server.tools import build_filter_tools

__all__ = [
    "ToolBinding",
    "build_filter_tools",
    "create_server",
    "register_tools",
]
