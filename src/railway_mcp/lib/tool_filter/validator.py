"""Advisory validation of filter strings.

The validator answers "would this filter do what I expect?" before the
filter is applied. It never raises and never logs; problems come back as
data in a FilterValidationResult.

Suggestions use a case-insensitive containment check against preset
names: "simpl" suggests "simple", but a transposition such as "simpel" is
not a substring of anything and gets no targeted suggestion.
"""

from railway_mcp.lib.tool_filter.models import FilterValidationResult
from railway_mcp.lib.tool_filter.presets import CategoryPresetIndex, get_default_index
from railway_mcp.lib.tool_filter.tokens import is_blank, split_filter_string

EMPTY_FILTER_HINT = "Empty filter disables filtering (all tools enabled)"


def _similar_presets(token: str, preset_names: list[str]) -> list[str]:
    needle = token.lower()
    return [
        name
        for name in preset_names
        if name.lower() in needle or needle in name.lower()
    ]


def validate_filter_config(
    filter_string: str | None,
    index: CategoryPresetIndex | None = None,
) -> FilterValidationResult:
    """Validate a filter string and suggest fixes for unknown tokens.

    The filter is valid if at least one token names a preset or a tool,
    matching the parser's fail-open behavior. Empty input is valid.

    Args:
        filter_string: Comma-separated preset names and tool identifiers.
        index: Preset index to validate against. Defaults to the shared
            compiled-in index.

    Returns:
        FilterValidationResult with per-token errors and suggestions.
    """
    if is_blank(filter_string):
        return FilterValidationResult(
            valid=True, errors=[], suggestions=[EMPTY_FILTER_HINT]
        )

    index = index if index is not None else get_default_index()
    preset_names = index.preset_names()
    errors: list[str] = []
    suggestions: list[str] = []
    has_valid_items = False

    for token in split_filter_string(filter_string):
        if index.is_preset(token) or index.registry.exists(token):
            has_valid_items = True
            continue

        errors.append(f'Invalid category or tool: "{token}"')
        for name in _similar_presets(token, preset_names):
            suggestion = f'Did you mean "{name}"?'
            if suggestion not in suggestions:
                suggestions.append(suggestion)

    if not has_valid_items:
        errors.append("No valid categories or tools found")
        suggestions.append("Available categories: " + ", ".join(preset_names))

    return FilterValidationResult(
        valid=has_valid_items, errors=errors, suggestions=suggestions
    )
