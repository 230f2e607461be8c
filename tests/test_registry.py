"""Tests for tool catalogue filtering (minimal vs full tool set)."""
import logging

import pytest

from todoist_mcp.config import ESSENTIAL_TOOLS, ServerConfig
from todoist_mcp.registry import build_registry, should_register_tool
from todoist_mcp.tools import get_tool_descriptor, get_tool_descriptors


CATALOGUE_NAMES = [descriptor.name for descriptor in get_tool_descriptors()]


class TestCatalogue:
    def test_catalogue_size_and_unique_names(self):
        assert len(CATALOGUE_NAMES) == 39
        assert len(set(CATALOGUE_NAMES)) == len(CATALOGUE_NAMES)

    def test_every_essential_tool_is_in_catalogue(self):
        assert ESSENTIAL_TOOLS <= set(CATALOGUE_NAMES)

    def test_lookup_by_name(self):
        assert get_tool_descriptor("move_task").action == "moving task"
        assert get_tool_descriptor("no_such_tool") is None

    def test_catalogue_is_read_only_copy(self):
        """Mutating a returned list leaves the catalogue intact."""
        descriptors = get_tool_descriptors()
        descriptors.clear()
        assert len(get_tool_descriptors()) == 39

    @pytest.mark.parametrize("descriptor", get_tool_descriptors(), ids=lambda d: d.name)
    def test_every_tool_has_object_schema(self, descriptor):
        tool = descriptor.to_tool()
        assert tool.name == descriptor.name
        assert tool.description
        assert tool.inputSchema["type"] == "object"


class TestShouldRegisterTool:
    def test_full_mode_registers_everything(self):
        config = ServerConfig(minimal_tool_set=False)
        assert should_register_tool("delete_project", config)
        assert should_register_tool("anything", config)

    def test_minimal_mode_registers_only_essential(self):
        config = ServerConfig(minimal_tool_set=True)
        assert should_register_tool("create_task", config)
        assert not should_register_tool("delete_project", config)
        assert not should_register_tool("me", config)


class TestBuildRegistry:
    def test_full_mode_registers_whole_catalogue_in_order(self):
        registry = build_registry(ServerConfig(minimal_tool_set=False))
        assert list(registry) == CATALOGUE_NAMES

    def test_minimal_mode_subset_property(self):
        """Registered names are essential, and every essential catalogue name is registered."""
        config = ServerConfig(minimal_tool_set=True)
        registry = build_registry(config)

        assert set(registry) <= config.essential_tools
        assert config.essential_tools & set(CATALOGUE_NAMES) <= set(registry)
        assert len(registry) == 18

    def test_rebuilding_is_idempotent(self):
        config = ServerConfig(minimal_tool_set=True)
        first = build_registry(config)
        second = build_registry(config)

        assert list(first) == list(second)
        assert first is not second

    def test_custom_essential_set(self):
        config = ServerConfig(minimal_tool_set=True, essential_tools=frozenset({"me", "get_task"}))
        registry = build_registry(config)
        assert list(registry) == ["me", "get_task"]

    def test_unknown_essential_names_are_ignored_with_warning(self, caplog):
        config = ServerConfig(minimal_tool_set=True, essential_tools=frozenset({"me", "teleport_task"}))

        with caplog.at_level(logging.WARNING, logger="todoist-mcp.registry"):
            registry = build_registry(config)

        assert list(registry) == ["me"]
        assert "teleport_task" in caplog.text

    def test_registry_values_are_catalogue_descriptors(self):
        registry = build_registry(ServerConfig(minimal_tool_set=False))
        for name, descriptor in registry.items():
            assert get_tool_descriptor(name) is descriptor


class TestHandlerDocs:
    @pytest.mark.parametrize(
        "descriptor",
        [d for d in get_tool_descriptors() if d.name.startswith(("get_", "update_"))],
        ids=lambda d: d.name,
    )
    def test_read_and_update_handlers_are_documented(self, descriptor):
        """List, get and update handlers describe what they return."""
        assert descriptor.handler.__doc__
        assert descriptor.handler.__doc__.strip()
