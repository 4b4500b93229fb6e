"""Data models for tool filtering.

This module defines the Pydantic models produced by the filter parser and
validator. A ToolFilterConfig is built once per server start from the
operator's filter string and is read-only afterwards.

Key models:
- ToolFilterConfig: Resolved filter (categories, specific tools, tool set)
- FilterValidationResult: Advisory result of validating a filter string
"""

from pydantic import BaseModel, ConfigDict, Field


class ToolFilterConfig(BaseModel):
    """Resolved tool filter configuration.

    When ``enabled`` is False every tool is admitted. When the filter string
    contained no recognized token at all, ``filtered_tools`` falls back to
    the whole registry and ``fell_back`` is set.

    Attributes:
        enabled: False only when the filter string was empty or absent.
        categories: Recognized preset names, in input order.
        specific_tools: Recognized tool identifiers, in input order.
        filtered_tools: Union of all preset tools and specific tools.
        unrecognized: Tokens that matched neither a preset nor a tool.
        fell_back: True when no token was recognized and all tools were
            enabled as a fallback.
        filter_string: The raw filter string the config was parsed from.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    enabled: bool = Field(default=False, description="Enable tool filtering")
    categories: tuple[str, ...] = Field(
        default=(), description="Recognized preset names"
    )
    specific_tools: tuple[str, ...] = Field(
        default=(), description="Recognized tool identifiers"
    )
    filtered_tools: frozenset[str] = Field(
        default_factory=frozenset, description="Resolved set of enabled tools"
    )
    unrecognized: tuple[str, ...] = Field(
        default=(), description="Tokens matching no preset or tool"
    )
    fell_back: bool = Field(
        default=False, description="All tools enabled because nothing matched"
    )
    filter_string: str | None = Field(
        default=None, description="Raw filter string"
    )

    @property
    def enabled_count(self) -> int:
        """Number of tools admitted by this configuration."""
        return len(self.filtered_tools)

    def sorted_tools(self) -> list[str]:
        """Enabled tool identifiers in alphabetical order."""
        return sorted(self.filtered_tools)


class FilterValidationResult(BaseModel):
    """Result of validating a filter string without applying it.

    Attributes:
        valid: True if at least one token was recognized, or the input
            was empty.
        errors: One message per unrecognized token, plus a summary message
            when nothing was recognized.
        suggestions: Hints for fixing the filter string.
    """

    model_config = ConfigDict(extra="forbid")

    valid: bool = Field(..., description="Whether the filter is usable")
    errors: list[str] = Field(default_factory=list, description="Error messages")
    suggestions: list[str] = Field(
        default_factory=list, description="Suggestions for fixing the filter"
    )
