"""Environment variable loading for the Railway MCP server.

Settings are read once by the CLI and passed explicitly to the rest of the
application. Nothing here is called at import time.
"""

import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values

from railway_mcp.config.defaults import TOOLS_FILTER_ENV_VAR
from railway_mcp.lib.errors import ConfigError
from railway_mcp.lib.logging_config import get_logger

logger = get_logger(__name__)


def get_env_var(
    name: str,
    default: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> str | None:
    """Get an environment variable.

    Args:
        name: Variable name.
        default: Value returned when the variable is unset.
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        The variable's value, or ``default``.
    """
    source = os.environ if environ is None else environ
    return source.get(name, default)


def load_env_file(path: str | Path) -> dict[str, str]:
    """Load variables from a ``.env`` file.

    Args:
        path: Path to the file.

    Returns:
        Mapping of variable name to value. Variables declared without a
        value are omitted.

    Raises:
        ConfigError: If the file does not exist.
    """
    env_path = Path(path)
    if not env_path.is_file():
        raise ConfigError("env_file", f"Environment file not found: {env_path}")

    values = dotenv_values(env_path)
    loaded = {key: value for key, value in values.items() if value is not None}
    logger.debug(f"Loaded {len(loaded)} variables from {env_path}")
    return loaded


def read_tool_filter_setting(
    cli_value: str | None = None,
    environ: Mapping[str, str] | None = None,
    env_file: str | Path | None = None,
) -> str | None:
    """Resolve the tool filter string.

    Precedence (highest to lowest):
    1. Explicit value from the command line
    2. Process environment
    3. ``.env`` file, when given

    Args:
        cli_value: Value of the ``--filter`` option, if passed.
        environ: Environment mapping. Defaults to ``os.environ``.
        env_file: Optional path to a ``.env`` file.

    Returns:
        The filter string, or None when no source sets it.
    """
    if cli_value is not None:
        logger.debug("Using tool filter from command line")
        return cli_value

    value = get_env_var(TOOLS_FILTER_ENV_VAR, environ=environ)
    if value is not None:
        logger.debug(f"Using tool filter from {TOOLS_FILTER_ENV_VAR}")
        return value

    if env_file is not None:
        value = load_env_file(env_file).get(TOOLS_FILTER_ENV_VAR)
        if value is not None:
            logger.debug(f"Using tool filter from {env_file}")
        return value

    return None
