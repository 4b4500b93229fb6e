"""Custom exception hierarchy for the Railway MCP server."""


class RailwayMCPError(Exception):
    """Base exception for all Railway MCP errors.

    All project-specific exceptions inherit from this class, enabling
    centralized exception handling in the CLI and server bootstrap.
    """

    pass


class ConfigError(RailwayMCPError):
    """Exception raised for configuration errors.

    Raised when configuration loading or parsing fails. It includes
    field-specific information to help operators identify and fix
    configuration issues.

    Attributes:
        field: The configuration field that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class ToolRegistryError(ConfigError):
    """Exception raised when the compiled-in tool registry is inconsistent.

    Covers duplicate tool identifiers, curated presets that reference tools
    missing from the registry, and preset names that collide with tool
    identifiers. These are authoring mistakes and abort startup.
    """

    def __init__(self, message: str, field: str = "tool_registry") -> None:
        """Create a registry error for the given field."""
        super().__init__(field, message)


class UnknownCategoryError(RailwayMCPError, KeyError):
    """Exception raised when a preset name is not known to the preset index.

    Attributes:
        category: The preset name that was looked up
    """

    def __init__(self, category: str) -> None:
        """Create a lookup error for an unknown preset name."""
        self.category = category
        self.message = f"Unknown tool category: '{category}'"
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return the message without KeyError's repr quoting."""
        return self.message
