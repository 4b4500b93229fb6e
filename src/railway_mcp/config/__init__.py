"""Configuration for the Railway MCP server.

Main components:
- defaults: Setting names, server defaults and filter examples
- env_loader: Reading settings from the environment and ``.env`` files
"""

from railway_mcp.config.defaults import (
    FILTER_EXAMPLES,
    TOOLS_FILTER_ENV_VAR,
    get_filter_examples,
)
from railway_mcp.config.env_loader import (
    get_env_var,
    load_env_file,
    read_tool_filter_setting,
)

__all__ = [
    "FILTER_EXAMPLES",
    "TOOLS_FILTER_ENV_VAR",
    "get_env_var",
    "get_filter_examples",
    "load_env_file",
    "read_tool_filter_setting",
]
