"""Per-tool admission checks and filter statistics."""

from railway_mcp.lib.tool_filter.models import ToolFilterConfig
from railway_mcp.lib.tool_filter.registry import ToolRegistry


def should_include_tool(tool_name: str, config: ToolFilterConfig) -> bool:
    """Check whether a tool should be registered under ``config``.

    Args:
        tool_name: Tool identifier to check.
        config: Resolved filter configuration.

    Returns:
        True if filtering is disabled or the tool is in the resolved set.
    """
    if not config.enabled:
        return True
    return tool_name in config.filtered_tools


def get_filter_stats(config: ToolFilterConfig, registry: ToolRegistry) -> str:
    """Summarize a filter configuration for operator-facing logs.

    Args:
        config: Resolved filter configuration.
        registry: Registry the configuration was resolved against.

    Returns:
        One line describing whether filtering is active, how many tools
        are enabled, and what selected them.
    """
    if not config.enabled:
        return "No tool filtering active - all tools enabled"

    total_tools = len(registry)
    enabled_tools = config.enabled_count
    percentage = int(enabled_tools * 100 / total_tools + 0.5) if total_tools else 0

    parts: list[str] = []
    if config.categories:
        parts.append(f"categories: {', '.join(config.categories)}")
    if config.specific_tools:
        parts.append(f"tools: {', '.join(config.specific_tools)}")
    if config.fell_back:
        parts.append("fallback: no valid categories or tools")

    return (
        f"Tool filtering active: {enabled_tools}/{total_tools} tools "
        f"({percentage}%) - {' + '.join(parts)}"
    )
