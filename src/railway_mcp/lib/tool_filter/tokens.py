"""Tokenization of filter strings."""

FILTER_SEPARATOR = ","


def split_filter_string(filter_string: str | None) -> list[str]:
    """Split a filter string into trimmed, non-empty tokens.

    Args:
        filter_string: Comma-separated preset names and tool identifiers.

    Returns:
        Tokens in input order. Duplicates are kept.
    """
    if not filter_string:
        return []
    tokens = (token.strip() for token in filter_string.split(FILTER_SEPARATOR))
    return [token for token in tokens if token]


def is_blank(filter_string: str | None) -> bool:
    """Return True if the filter string is absent or only whitespace."""
    return filter_string is None or not filter_string.strip()
