"""Compiled-in tool metadata for the Railway MCP server.

Every tool the server can register has an entry in TOOL_DEFINITIONS. The
complexity and use-case presets are derived from this table; only the
presets in CURATED_PRESETS list their tools by hand, and those lists are
checked against the table when the preset index is built.
"""

from railway_mcp.models.tool import ToolDescriptor


def _define(
    name: str,
    complexity: str,
    use_cases: tuple[str, ...],
    description: str,
) -> ToolDescriptor:
    return ToolDescriptor(
        name=name,
        complexity=complexity,
        use_cases=frozenset(use_cases),
        description=description,
    )


TOOL_DEFINITIONS: tuple[ToolDescriptor, ...] = (
    # Core - Simple
    _define("project_list", "simple", ("core",), "List all projects"),
    _define("project_info", "simple", ("core",), "Get project details"),
    _define("project_environments", "simple", ("core",), "List project environments"),
    _define("service_list", "simple", ("core",), "List services in project"),
    _define("service_info", "simple", ("core",), "Get service details"),
    _define("environment-list", "simple", ("core",), "List environments"),
    _define("environment-info", "simple", ("core",), "Get environment details"),
    _define("deployment_list", "simple", ("core", "deployment"), "List deployments"),
    _define(
        "deployment_status", "simple", ("core", "deployment"),
        "Check deployment status",
    ),
    # Data - Simple
    _define(
        "list_service_variables", "simple", ("data",),
        "List environment variables",
    ),
    _define("volume_list", "simple", ("data",), "List volumes"),
    _define(
        "database_list_types", "simple", ("data",),
        "List available database types",
    ),
    _define("backup-list", "simple", ("data",), "List backups"),
    _define("backup-get", "simple", ("data",), "Get backup details"),
    _define("backup-policy-list", "simple", ("data",), "List backup policies"),
    # Monitoring - Simple
    _define("logs-build", "simple", ("monitoring",), "Get build logs"),
    _define("logs-deployment", "simple", ("monitoring",), "Get runtime logs"),
    _define("logs-environment", "simple", ("monitoring",), "Get environment logs"),
    _define("logs-http", "simple", ("monitoring",), "Get HTTP request logs"),
    _define("logs-plugin", "simple", ("monitoring",), "Get database plugin logs"),
    _define("deployment_logs", "simple", ("monitoring",), "Get deployment logs"),
    _define("monitoring-alerts", "simple", ("monitoring",), "List monitoring alerts"),
    # Team - Simple
    _define("team-list", "simple", ("team",), "List all teams"),
    _define("team-get", "simple", ("team",), "Get team details"),
    _define("team-members", "simple", ("team",), "List team members"),
    _define("usage-team", "simple", ("team",), "Get team usage metrics"),
    _define("usage-project", "simple", ("team",), "Get project usage metrics"),
    _define("billing-info", "simple", ("team",), "Get billing information"),
    _define("usage-alerts", "simple", ("team",), "Get usage alerts"),
    # Integration - Simple
    _define("webhook-list", "simple", ("integration",), "List webhooks"),
    _define("webhook-get", "simple", ("integration",), "Get webhook details"),
    _define("webhook-deliveries", "simple", ("integration",), "Get delivery history"),
    _define("webhook-events", "simple", ("integration",), "List supported events"),
    _define("template-list", "simple", ("integration",), "List available templates"),
    _define("template-get", "simple", ("integration",), "Get template details"),
    _define("template-search", "simple", ("integration",), "Search templates"),
    # Enterprise - Simple
    _define("security-access-tokens", "simple", ("enterprise",), "List access tokens"),
    # Utility - Simple
    _define(
        "configure_api_token", "simple", ("utility",),
        "Configure Railway API token",
    ),
    _define(
        "tool_filter_examples", "simple", ("utility",),
        "Get example tool filter configurations",
    ),
    _define(
        "tool_filter_categories", "simple", ("utility",),
        "List available tool categories",
    ),
    _define(
        "tool_filter_current", "simple", ("utility",),
        "Show current filter configuration",
    ),
    _define(
        "tool_filter_validate", "simple", ("utility",),
        "Validate tool filter configuration",
    ),
    # Core - Intermediate
    _define("project_create", "intermediate", ("core",), "Create new project"),
    _define("project_delete", "intermediate", ("core",), "Delete project"),
    _define(
        "service_create_from_repo", "intermediate", ("core", "deployment"),
        "Create service from GitHub",
    ),
    _define(
        "service_create_from_image", "intermediate", ("core", "deployment"),
        "Create service from Docker image",
    ),
    _define(
        "service_update", "intermediate", ("core",),
        "Update service configuration",
    ),
    _define("service_delete", "intermediate", ("core",), "Delete service"),
    _define("service_restart", "intermediate", ("core",), "Restart service"),
    _define("environment-create", "intermediate", ("core",), "Create environment"),
    _define("environment-update", "intermediate", ("core",), "Update environment"),
    _define("environment-delete", "intermediate", ("core",), "Delete environment"),
    _define(
        "deployment_trigger", "intermediate", ("core", "deployment"),
        "Trigger new deployment",
    ),
    # Data - Intermediate
    _define("variable_set", "intermediate", ("data",), "Set/update variable"),
    _define("variable_delete", "intermediate", ("data",), "Delete variable"),
    _define("volume_create", "intermediate", ("data",), "Create persistent volume"),
    _define("volume_update", "intermediate", ("data",), "Update volume"),
    _define("volume_delete", "intermediate", ("data",), "Delete volume"),
    _define("backup-create", "intermediate", ("data",), "Create backup"),
    _define("backup-delete", "intermediate", ("data",), "Delete backup"),
    # Monitoring - Intermediate
    _define(
        "metrics-get", "intermediate", ("monitoring",),
        "Get resource usage metrics",
    ),
    _define(
        "monitoring-metric-create", "intermediate", ("monitoring",),
        "Create custom metric",
    ),
    _define("monitoring-alert-update", "intermediate", ("monitoring",), "Update alert"),
    _define("monitoring-alert-delete", "intermediate", ("monitoring",), "Delete alert"),
    # Team - Intermediate
    _define("team-create", "intermediate", ("team",), "Create team"),
    _define("team-update", "intermediate", ("team",), "Update team"),
    _define("team-invite", "intermediate", ("team",), "Invite user to team"),
    _define("team-member-remove", "intermediate", ("team",), "Remove team member"),
    _define("team-member-role-update", "intermediate", ("team",), "Update member role"),
    _define(
        "usage-compare", "intermediate", ("team",),
        "Compare usage across projects",
    ),
    # Integration - Intermediate
    _define("webhook-create", "intermediate", ("integration",), "Create webhook"),
    _define("webhook-update", "intermediate", ("integration",), "Update webhook"),
    _define("webhook-delete", "intermediate", ("integration",), "Delete webhook"),
    _define("webhook-test", "intermediate", ("integration",), "Test webhook"),
    # Enterprise - Intermediate
    _define(
        "networking-private-networks", "intermediate", ("enterprise",),
        "List private networks",
    ),
    _define(
        "networking-load-balancers", "intermediate", ("enterprise",),
        "List load balancers",
    ),
    _define(
        "security-audit-logs", "intermediate", ("enterprise",),
        "View security audit logs",
    ),
    _define(
        "security-vulnerabilities", "intermediate", ("enterprise",),
        "Get vulnerability report",
    ),
    _define(
        "security-ip-allowlists", "intermediate", ("enterprise",),
        "List IP allow lists",
    ),
    # Core - Pro
    _define("project_delete_batch", "pro", ("core",), "Delete multiple projects"),
    _define("environment-clone", "pro", ("core",), "Clone environment with variables"),
    _define(
        "environment-deploy", "pro", ("core", "deployment"),
        "Deploy all services in environment",
    ),
    # Data - Pro
    _define(
        "database_deploy_from_template", "pro", ("data", "deployment"),
        "Deploy database from template",
    ),
    _define("variable_bulk_set", "pro", ("data",), "Set multiple variables"),
    _define("variable_copy", "pro", ("data",), "Copy variables between environments"),
    _define("backup-restore", "pro", ("data",), "Restore from backup"),
    _define("backup-policy-create", "pro", ("data",), "Create backup policy"),
    # Monitoring - Pro
    _define("monitoring-metrics-query", "pro", ("monitoring",), "Query custom metrics"),
    _define("monitoring-apm-data", "pro", ("monitoring",), "Get APM data"),
    _define(
        "monitoring-alert-create", "pro", ("monitoring",),
        "Create monitoring alert",
    ),
    _define("monitoring-traces", "pro", ("monitoring",), "Get distributed tracing"),
    _define(
        "monitoring-trace-details", "pro", ("monitoring",),
        "Get detailed trace info",
    ),
    # Team - Pro
    _define("team-delete", "pro", ("team",), "Delete team"),
    # Integration - Pro
    _define(
        "template-deploy", "pro", ("integration", "deployment"),
        "Deploy from template",
    ),
    # Enterprise - Pro
    _define(
        "networking-network-create", "pro", ("enterprise",),
        "Create private network",
    ),
    _define(
        "networking-endpoint-add", "pro", ("enterprise",),
        "Add service to network",
    ),
    _define(
        "networking-endpoint-remove", "pro", ("enterprise",),
        "Remove service from network",
    ),
    _define(
        "networking-load-balancer-create", "pro", ("enterprise",),
        "Create load balancer",
    ),
    _define("networking-lb-target-add", "pro", ("enterprise",), "Add target to LB"),
    _define(
        "networking-lb-target-remove", "pro", ("enterprise",),
        "Remove target from LB",
    ),
    _define(
        "networking-lb-health-check-update", "pro", ("enterprise",),
        "Update LB health check",
    ),
    _define(
        "networking-load-balancer-delete", "pro", ("enterprise",),
        "Delete load balancer",
    ),
    _define("networking-routes", "pro", ("enterprise",), "List network routes"),
    _define("networking-route-create", "pro", ("enterprise",), "Create network route"),
    _define("networking-route-delete", "pro", ("enterprise",), "Delete network route"),
    _define(
        "networking-security-groups", "pro", ("enterprise",),
        "List security groups",
    ),
    _define(
        "networking-security-group-create", "pro", ("enterprise",),
        "Create security group",
    ),
    _define("security-scan-trigger", "pro", ("enterprise",), "Trigger security scan"),
    _define("security-token-create", "pro", ("enterprise",), "Create access token"),
    _define("security-token-revoke", "pro", ("enterprise",), "Revoke access token"),
    _define(
        "security-ip-allowlist-create", "pro", ("enterprise",),
        "Create IP allow list",
    ),
    _define(
        "security-compliance-report", "pro", ("enterprise",),
        "Generate compliance report",
    ),
)

# Curated presets, listed before the derived ones in category listings
CURATED_PRESETS: dict[str, tuple[str, tuple[str, ...]]] = {
    "extra-simple": (
        "Absolute essentials for basic service management (9 tools)",
        (
            "project_list",
            "service_list",
            "service_info",
            "deployment_list",
            "deployment_status",
            "logs-deployment",
            "service_restart",
            "list_service_variables",
            "variable_set",
        ),
    ),
}

COMPLEXITY_PRESET_DESCRIPTIONS: dict[str, str] = {
    "simple": "Basic information and listing operations",
    "intermediate": "CRUD operations and basic management",
    "pro": "All tools including advanced workflows and enterprise features",
}

USE_CASE_PRESET_DESCRIPTIONS: dict[str, str] = {
    "core": "Essential project, service, and deployment management",
    "deployment": "Deployment and service creation tools",
    "data": "Database, volume, backup, and variable management",
    "monitoring": "Logs, metrics, alerts, and observability",
    "enterprise": "Advanced networking, security, and compliance",
    "team": "Team management, usage, and billing",
    "integration": "Webhooks, templates, and external integrations",
    "utility": "Configuration and utility tools",
}
