"""Tool filter manager for the server bootstrap.

This module provides the ToolFilterManager class that owns the resolved
filter for one server run. It binds a preset index (and through it the
tool registry) to a single ToolFilterConfig, and is the object handed to
the registration bootstrap and the diagnostic tools.

Key responsibilities:
- Resolve the operator's filter string once, at construction
- Answer per-tool admission checks during registration
- Report filter statistics for startup logs and diagnostics
- Validate candidate filter strings without applying them
"""

from typing import Any

from railway_mcp.lib.logging_config import get_logger
from railway_mcp.lib.tool_filter.gate import get_filter_stats, should_include_tool
from railway_mcp.lib.tool_filter.models import FilterValidationResult, ToolFilterConfig
from railway_mcp.lib.tool_filter.parser import ToolFilterParser
from railway_mcp.lib.tool_filter.presets import CategoryPresetIndex, get_default_index
from railway_mcp.lib.tool_filter.registry import ToolRegistry
from railway_mcp.lib.tool_filter.validator import validate_filter_config

logger = get_logger(__name__)


class ToolFilterManager:
    """Owns the resolved tool filter for one server run.

    Attributes:
        index: Preset index used for resolution.
        parser: Parser bound to ``index``.
        config: The resolved ToolFilterConfig. Never mutated.
    """

    def __init__(
        self,
        filter_string: str | None,
        index: CategoryPresetIndex | None = None,
    ) -> None:
        """Resolve ``filter_string`` against ``index``.

        Args:
            filter_string: Operator-supplied filter string, read once at
                startup by the caller.
            index: Preset index. Defaults to the compiled-in one.
        """
        self.index = index if index is not None else get_default_index()
        self.parser = ToolFilterParser(self.index)
        self.config: ToolFilterConfig = self.parser.parse(filter_string)

        logger.debug(
            f"ToolFilterManager created: enabled={self.config.enabled}, "
            f"tools={self.config.enabled_count}/{len(self.registry)}"
        )

    @property
    def registry(self) -> ToolRegistry:
        """The tool registry behind the preset index."""
        return self.index.registry

    def should_include(self, tool_name: str) -> bool:
        """Check whether ``tool_name`` is admitted by the resolved filter."""
        return should_include_tool(tool_name, self.config)

    def get_filter_stats(self) -> str:
        """Get the one-line summary of the resolved filter."""
        return get_filter_stats(self.config, self.registry)

    def log_filter_status(self) -> None:
        """Log the filter summary and any fallback at startup."""
        logger.info(self.get_filter_stats())
        if self.config.fell_back:
            logger.warning(
                f"Tool filter {self.config.filter_string!r} matched nothing; "
                f"all {self.config.enabled_count} tools are enabled"
            )

    def preview(self, filter_string: str | None) -> ToolFilterConfig:
        """Resolve another filter string without replacing the active one."""
        return self.parser.parse(filter_string)

    def validate(self, filter_string: str | None) -> FilterValidationResult:
        """Validate a filter string against the same preset index."""
        return validate_filter_config(filter_string, self.index)

    def describe_categories(self) -> dict[str, dict[str, Any]]:
        """Get every preset with its description and tools.

        Returns:
            Mapping of preset name to ``description``, ``tools`` and
            ``tool_count``, in listing order.
        """
        return {
            name: {
                "description": preset.description,
                "tools": list(preset.tools),
                "tool_count": len(preset.tools),
            }
            for name, preset in self.index.presets.items()
        }

    def get_current(self) -> dict[str, Any]:
        """Get the active filter as plain data for diagnostics."""
        config = self.config
        return {
            "filter_string": config.filter_string or None,
            "enabled": config.enabled,
            "categories": list(config.categories),
            "specific_tools": list(config.specific_tools),
            "unrecognized": list(config.unrecognized),
            "fell_back": config.fell_back,
            "enabled_tools": config.sorted_tools(),
            "total_enabled": config.enabled_count,
            "total_tools": len(self.registry),
            "stats": self.get_filter_stats(),
        }
