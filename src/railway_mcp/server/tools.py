"""Diagnostic tools for inspecting and testing the tool filter.

These tools let an MCP client see why a tool is or is not exposed, and try
out filter strings before an operator commits one to the environment.
"""

from collections.abc import Callable
from typing import Annotated

from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from railway_mcp.config.defaults import TOOLS_FILTER_ENV_VAR, get_filter_examples
from railway_mcp.lib.tool_filter.gate import get_filter_stats
from railway_mcp.lib.tool_filter.manager import ToolFilterManager
from railway_mcp.models.tool import ComplexityLevel, UseCase
from railway_mcp.server.bindings import ToolBinding


def _bullets(items: list[str]) -> str:
    return "\n".join(f"  • {item}" for item in items)


def make_validate_tool(manager: ToolFilterManager) -> Callable[[str], str]:
    """Create the ``tool_filter_validate`` handler."""

    def tool_filter_validate(
        filter: Annotated[
            str,
            Field(
                description=(
                    "Tool filter string to validate (e.g., 'simple,deployment' "
                    "or 'project_list,service_create_from_repo')"
                )
            ),
        ],
    ) -> str:
        validation = manager.validate(filter)
        if not validation.valid:
            text = (
                "❌ Invalid filter configuration\n\n"
                f"Errors:\n{_bullets(validation.errors)}"
            )
            if validation.suggestions:
                text += f"\n\nSuggestions:\n{_bullets(validation.suggestions)}"
            raise ToolError(text)

        config = manager.preview(filter)
        stats = get_filter_stats(config, manager.registry)
        text = (
            f"✅ Valid filter configuration\n\n{stats}\n\n"
            f"Enabled tools: {', '.join(config.sorted_tools())}"
        )
        if validation.errors:
            text += f"\n\nWarnings:\n{_bullets(validation.errors)}"
        if validation.suggestions:
            text += f"\n\nSuggestions:\n{_bullets(validation.suggestions)}"
        return text

    return tool_filter_validate


def make_examples_tool() -> Callable[[], str]:
    """Create the ``tool_filter_examples`` handler."""

    def tool_filter_examples() -> str:
        examples = get_filter_examples()
        example_text = "\n".join(
            f"**{use_case}**: `{filter_string}`"
            for use_case, filter_string in examples.items()
        )
        return f"""# Tool Filter Examples

Set `{TOOLS_FILTER_ENV_VAR}` environment variable to filter tools:

{example_text}

## How to use:
```bash
# Single category
export {TOOLS_FILTER_ENV_VAR}="simple"

# Multiple categories
export {TOOLS_FILTER_ENV_VAR}="intermediate,deployment"

# Specific tools
export {TOOLS_FILTER_ENV_VAR}="project_list,service_create_from_repo"

# Mixed approach
export {TOOLS_FILTER_ENV_VAR}="simple,backup-restore"
```"""

    return tool_filter_examples


def make_categories_tool(manager: ToolFilterManager) -> Callable[[], str]:
    """Create the ``tool_filter_categories`` handler."""

    def tool_filter_categories() -> str:
        categories = manager.describe_categories()
        details = "\n\n".join(
            f"**{name}** ({info['tool_count']} tools): {info['description']}"
            for name, info in categories.items()
        )
        complexity_lines = "\n".join(
            f"- `{level.value}`: {categories[level.value]['description']} "
            f"({categories[level.value]['tool_count']} tools)"
            for level in ComplexityLevel
        )
        use_case_lines = "\n".join(
            f"- `{tag.value}`: {categories[tag.value]['description']} "
            f"({categories[tag.value]['tool_count']} tools)"
            for tag in UseCase
        )
        return (
            f"# Available Tool Categories\n\n{details}\n\n"
            f"## Category Hierarchy:\n\n"
            f"**Complexity Levels** (cumulative):\n{complexity_lines}\n\n"
            f"**Use Case Categories:**\n{use_case_lines}"
        )

    return tool_filter_categories


def make_current_tool(manager: ToolFilterManager) -> Callable[[], str]:
    """Create the ``tool_filter_current`` handler."""

    def tool_filter_current() -> str:
        current = manager.get_current()
        text = f"# Current Tool Filter Configuration\n\n{current['stats']}"

        if not current["enabled"]:
            return (
                text + f"\n\n**All {current['total_enabled']} tools are enabled** "
                "(no filtering active)"
            )

        text += f"\n\n**Filter String**: `{current['filter_string']}`"
        if current["categories"]:
            text += f"\n\n**Active Categories**: {', '.join(current['categories'])}"
        if current["specific_tools"]:
            text += f"\n\n**Specific Tools**: {', '.join(current['specific_tools'])}"
        if current["unrecognized"]:
            text += (
                f"\n\n**Unrecognized Entries**: {', '.join(current['unrecognized'])}"
            )
        if current["fell_back"]:
            text += (
                "\n\n**Warning**: nothing in the filter matched, "
                "all tools are enabled"
            )
        text += (
            f"\n\n**Enabled Tools** ({current['total_enabled']}):\n"
            f"{', '.join(current['enabled_tools'])}"
        )
        return text

    return tool_filter_current


def build_filter_tools(manager: ToolFilterManager) -> list[ToolBinding]:
    """Build the diagnostic tool bindings for ``manager``.

    Args:
        manager: Manager holding the active filter.

    Returns:
        Bindings for the four ``tool_filter_*`` tools.
    """
    return [
        ToolBinding(
            name="tool_filter_validate",
            fn=make_validate_tool(manager),
            description="Validate a tool filter configuration before applying it",
        ),
        ToolBinding(
            name="tool_filter_examples",
            fn=make_examples_tool(),
            description=(
                "Get example tool filter configurations for different use cases"
            ),
        ),
        ToolBinding(
            name="tool_filter_categories",
            fn=make_categories_tool(manager),
            description="List all available tool categories and their descriptions",
        ),
        ToolBinding(
            name="tool_filter_current",
            fn=make_current_tool(manager),
            description=(
                "Show the current tool filter configuration and enabled tools"
            ),
        ),
    ]
