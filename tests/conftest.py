"""Pytest configuration and shared fixtures for Railway MCP tests."""

import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from railway_mcp.lib.tool_filter.presets import CategoryPresetIndex, get_default_index
from railway_mcp.lib.tool_filter.registry import ToolRegistry
from railway_mcp.models.tool import ToolDescriptor


@pytest.fixture
def isolated_env() -> Generator[dict[str, str], None, None]:
    """Provide isolated environment variables for testing.

    Saves current environment and restores after test.

    Yields:
        Dictionary of original environment variables
    """
    original_env = os.environ.copy()
    yield original_env
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def temp_env_file(tmp_path: Path) -> Path:
    """Create an empty .env file in a temporary directory."""
    env_file = tmp_path / ".env"
    env_file.write_text("")
    return env_file


@pytest.fixture(scope="session")
def preset_index() -> CategoryPresetIndex:
    """Shared preset index built from the compiled-in definitions."""
    return get_default_index()


@pytest.fixture(scope="session")
def registry(preset_index: CategoryPresetIndex) -> ToolRegistry:
    """Shared compiled-in tool registry."""
    return preset_index.registry


def _make_tool(
    name: str,
    complexity: str = "simple",
    use_cases: tuple[str, ...] = ("core",),
    description: str = "",
) -> ToolDescriptor:
    """Build a ToolDescriptor with sensible defaults for tests."""
    return ToolDescriptor(
        name=name,
        complexity=complexity,
        use_cases=frozenset(use_cases),
        description=description or f"{name} tool",
    )


@pytest.fixture
def make_tool() -> Any:
    """Factory for ToolDescriptor objects with test defaults."""
    return _make_tool


@pytest.fixture
def small_registry() -> ToolRegistry:
    """A small registry covering every complexity level and use-case tag."""
    return ToolRegistry(
        [
            _make_tool("alpha_list", "simple", ("core", "utility")),
            _make_tool("alpha_create", "intermediate", ("core", "deployment", "team")),
            _make_tool("alpha_purge", "pro", ("data", "enterprise")),
            _make_tool("beta_logs", "simple", ("monitoring", "integration")),
        ]
    )


@pytest.fixture
def small_index(small_registry: ToolRegistry) -> CategoryPresetIndex:
    """Preset index over ``small_registry`` with one curated preset."""
    return CategoryPresetIndex(
        small_registry,
        curated={"starter": ("Starter tools", ("alpha_list", "beta_logs"))},
    )


def pytest_configure(config: Any) -> None:
    """Configure pytest with marker options."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests",
    )
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests",
    )
