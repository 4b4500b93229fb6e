"""Unit tests for ToolFilterManager."""

import logging

from railway_mcp.lib.tool_filter.manager import ToolFilterManager
from railway_mcp.lib.tool_filter.presets import CategoryPresetIndex


class TestToolFilterManager:
    """Tests for the manager facade."""

    def test_resolves_filter_once(self, preset_index: CategoryPresetIndex) -> None:
        """Test that the config is resolved at construction."""
        manager = ToolFilterManager("simple")

        assert manager.index is preset_index
        assert manager.config.categories == ("simple",)
        assert manager.should_include("project_list") is True
        assert manager.should_include("project_delete_batch") is False

    def test_disabled_manager(self) -> None:
        """Test a manager without a filter string."""
        manager = ToolFilterManager(None)

        assert manager.config.enabled is False
        assert manager.should_include("anything") is True
        assert "No tool filtering active" in manager.get_filter_stats()

    def test_preview_does_not_replace_config(self) -> None:
        """Test that previewing another filter leaves the active one alone."""
        manager = ToolFilterManager("service_info")

        preview = manager.preview("pro")

        assert preview.categories == ("pro",)
        assert manager.config.specific_tools == ("service_info",)
        assert manager.should_include("project_list") is False

    def test_validate_uses_same_index(self, small_index: CategoryPresetIndex) -> None:
        """Test validation against the manager's own index."""
        manager = ToolFilterManager("starter", index=small_index)

        assert manager.validate("starter").valid is True
        assert manager.validate("simple,alpha_purge").valid is True
        assert manager.validate("project_list").valid is False

    def test_describe_categories(self, preset_index: CategoryPresetIndex) -> None:
        """Test category listing data."""
        categories = ToolFilterManager(None).describe_categories()

        assert list(categories) == preset_index.preset_names()
        simple = categories["simple"]
        assert simple["description"] == "Basic information and listing operations"
        assert simple["tool_count"] == len(simple["tools"])
        assert "project_list" in simple["tools"]

    def test_get_current_enabled(self) -> None:
        """Test diagnostics for an active filter."""
        current = ToolFilterManager("simple,project_delete,nope").get_current()

        assert current["filter_string"] == "simple,project_delete,nope"
        assert current["enabled"] is True
        assert current["categories"] == ["simple"]
        assert current["specific_tools"] == ["project_delete"]
        assert current["unrecognized"] == ["nope"]
        assert current["fell_back"] is False
        assert current["enabled_tools"] == sorted(current["enabled_tools"])
        assert current["total_enabled"] == len(current["enabled_tools"])
        assert "Tool filtering active" in current["stats"]

    def test_get_current_disabled(self) -> None:
        """Test diagnostics with filtering off."""
        current = ToolFilterManager("").get_current()

        assert current["filter_string"] is None
        assert current["enabled"] is False
        assert current["total_enabled"] == current["total_tools"]

    def test_log_filter_status(self, caplog) -> None:
        """Test startup logging, including the fallback warning."""
        manager = ToolFilterManager("bogus_token_xyz")

        with caplog.at_level(logging.INFO, logger="railway_mcp"):
            manager.log_filter_status()

        assert "Tool filtering active" in caplog.text
        assert "matched nothing" in caplog.text
