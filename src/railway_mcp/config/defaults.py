"""Default configuration values for the Railway MCP server."""

# Environment variable holding the tool filter string
TOOLS_FILTER_ENV_VAR = "RAILWAY_TOOLS_FILTER"

# Environment variable holding the Railway API token
API_TOKEN_ENV_VAR = "RAILWAY_API_TOKEN"

SERVER_NAME = "railway-mcp"

DEFAULT_ENV_FILE = ".env"

# Example filter strings, keyed by audience
FILTER_EXAMPLES: dict[str, str] = {
    "Basic users": "simple",
    "Developers": "intermediate,deployment",
    "DevOps teams": "pro",
    "Monitoring focus": "monitoring,simple",
    "Data management": "data,core",
    "Enterprise setup": "enterprise,team",
    "Custom selection": "project_list,service_create_from_repo,deployment_status",
    "Mixed approach": "simple,backup-restore,security-audit-logs",
}


def get_filter_examples() -> dict[str, str]:
    """Get example filter configurations for documentation.

    Returns:
        A copy of FILTER_EXAMPLES, safe for callers to modify.
    """
    return dict(FILTER_EXAMPLES)
