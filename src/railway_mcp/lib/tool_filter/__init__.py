"""Tool categorization and filtering.

This package decides which tools a server instance registers. A static
registry of tool metadata (complexity tier, use-case tags) feeds a set of
named presets; an operator-supplied filter string is resolved against both
into the set of enabled tools.

Key components:
- ToolRegistry: Read-only tool metadata, keyed by tool identifier
- CategoryPresetIndex: Presets derived from the registry
- ToolFilterParser / parse_tool_filter: Filter string -> ToolFilterConfig
- validate_filter_config: Advisory validation with suggestions
- should_include_tool / get_filter_stats: Admission checks and summaries
- ToolFilterManager: Owns the resolved filter for one server run

Example usage:
    from railway_mcp.lib.tool_filter import ToolFilterManager

    manager = ToolFilterManager("simple,project_delete")
    manager.should_include("project_delete")  # True
    manager.should_include("project_delete_batch")  # False
"""

from railway_mcp.lib.tool_filter.gate import get_filter_stats, should_include_tool
from railway_mcp.lib.tool_filter.manager import ToolFilterManager
from railway_mcp.lib.tool_filter.models import FilterValidationResult, ToolFilterConfig
from railway_mcp.lib.tool_filter.parser import ToolFilterParser, parse_tool_filter
from railway_mcp.lib.tool_filter.presets import (
    CategoryPresetIndex,
    build_default_index,
    get_default_index,
)
from railway_mcp.lib.tool_filter.registry import ToolRegistry, build_default_registry
from railway_mcp.lib.tool_filter.validator import validate_filter_config

__all__ = [
    "CategoryPresetIndex",
    "FilterValidationResult",
    "ToolFilterConfig",
    "ToolFilterManager",
    "ToolFilterParser",
    "ToolRegistry",
    "build_default_index",
    "build_default_registry",
    "get_default_index",
    "get_filter_stats",
    "parse_tool_filter",
    "should_include_tool",
    "validate_filter_config",
]
