"""Filter string parsing.

Turns an operator-supplied filter string such as ``"simple,project_delete"``
into a ToolFilterConfig. Supported forms:

- ``"simple"``: a single preset
- ``"simple,deployment"``: several presets
- ``"project_list,service_create_from_repo"``: specific tools
- ``"simple,project_delete"``: presets and tools mixed

Each token is classified as a preset first and a tool identifier second,
so a name that is both always resolves as a preset. Unrecognized tokens are
logged and skipped. If nothing at all is recognized the filter fails open
and every tool is enabled.
"""

from railway_mcp.lib.logging_config import get_logger
from railway_mcp.lib.tool_filter.models import ToolFilterConfig
from railway_mcp.lib.tool_filter.presets import CategoryPresetIndex, get_default_index
from railway_mcp.lib.tool_filter.tokens import is_blank, split_filter_string

logger = get_logger(__name__)


class ToolFilterParser:
    """Resolves filter strings against a preset index and its registry.

    Attributes:
        index: Preset index used to classify tokens.
    """

    def __init__(self, index: CategoryPresetIndex) -> None:
        """Create a parser bound to ``index``."""
        self.index = index

    @property
    def all_tools(self) -> frozenset[str]:
        """Every tool identifier in the underlying registry."""
        return self.index.registry.tool_names

    def parse(self, filter_string: str | None) -> ToolFilterConfig:
        """Parse a filter string into a resolved configuration.

        Args:
            filter_string: Comma-separated preset names and tool identifiers.
                None or a blank string disables filtering.

        Returns:
            The resolved ToolFilterConfig.
        """
        if is_blank(filter_string):
            return ToolFilterConfig(
                enabled=False,
                filtered_tools=self.all_tools,
                filter_string=filter_string,
            )

        categories: list[str] = []
        specific_tools: list[str] = []
        unrecognized: list[str] = []

        for token in split_filter_string(filter_string):
            if self.index.is_preset(token):
                bucket = categories
            elif self.index.registry.exists(token):
                bucket = specific_tools
            else:
                bucket = unrecognized
            if token not in bucket:
                bucket.append(token)

        if unrecognized:
            warnings = ", ".join(
                f'Unknown category or tool: "{token}"' for token in unrecognized
            )
            logger.warning(f"Tool filter warnings: {warnings}")

        filtered_tools: set[str] = set(specific_tools)
        for category in categories:
            filtered_tools.update(self.index.tools_of(category))

        fell_back = not filtered_tools
        if fell_back:
            logger.warning(
                "No valid tools or categories found in filter, enabling all tools"
            )
            filtered_tools = set(self.all_tools)

        config = ToolFilterConfig(
            enabled=True,
            categories=tuple(categories),
            specific_tools=tuple(specific_tools),
            filtered_tools=frozenset(filtered_tools),
            unrecognized=tuple(unrecognized),
            fell_back=fell_back,
            filter_string=filter_string,
        )
        logger.debug(
            f"Parsed tool filter {filter_string!r}: "
            f"categories={list(config.categories)}, "
            f"tools={list(config.specific_tools)}, "
            f"enabled={config.enabled_count}"
        )
        return config


def parse_tool_filter(
    filter_string: str | None,
    index: CategoryPresetIndex | None = None,
) -> ToolFilterConfig:
    """Parse a filter string against ``index`` or the compiled-in presets.

    Args:
        filter_string: Comma-separated preset names and tool identifiers.
        index: Preset index to resolve against. Defaults to the shared
            index built from the compiled-in definitions.

    Returns:
        The resolved ToolFilterConfig.
    """
    if index is None:
        index = get_default_index()
    return ToolFilterParser(index).parse(filter_string)
