"""Tests for tastools.services.tool_registry module."""

import pytest

from tastools.domain import CATALOGUE, CatalogueError, ToolSchema
from tastools.services.tool_registry import TOOL_REGISTRY, ToolRegistry, lookup


def make_schema(name: str, priority_index: int) -> ToolSchema:
    """Helper to create a minimal schema."""
    return ToolSchema(
        name=name,
        fixed_order=True,
        has_off=False,
        registers_active_state=False,
        expects_arguments=False,
        priority_index=priority_index,
    )


class TestToolRegistry:
    """Tests for ToolRegistry."""

    def test_lookup(self):
        """Test looking up a known tool."""
        schema = TOOL_REGISTRY.lookup("strafe")
        assert schema is not None
        assert schema.name == "strafe"
        assert schema.fixed_order is False

    def test_lookup_unknown(self):
        """Test looking up an unknown tool returns None."""
        assert TOOL_REGISTRY.lookup("jump") is None

    def test_lookup_is_case_sensitive(self):
        """Test names must match exactly."""
        assert TOOL_REGISTRY.lookup("Duck") is None
        assert "duck" in TOOL_REGISTRY
        assert "Duck" not in TOOL_REGISTRY

    def test_module_lookup(self):
        """Test the module-level lookup uses the process-wide registry."""
        assert lookup("duck") is TOOL_REGISTRY.lookup("duck")

    def test_holds_whole_catalogue(self):
        """Test every catalogue entry is registered."""
        assert len(TOOL_REGISTRY) == len(CATALOGUE) == 15

    def test_priority_order(self):
        """Test iteration follows execution order."""
        names = TOOL_REGISTRY.names()
        assert names[0] == "check"
        assert names[-1] == "decel"
        assert [s.name for s in TOOL_REGISTRY] == names

    def test_duplicate_name(self):
        """Test two tools with one name are a catalogue defect."""
        with pytest.raises(CatalogueError, match="Duplicate tool"):
            ToolRegistry([make_schema("a", 0), make_schema("a", 1)])

    def test_duplicate_priority(self):
        """Test two tools with one priority index are a catalogue defect."""
        with pytest.raises(CatalogueError, match="priority index"):
            ToolRegistry([make_schema("a", 0), make_schema("b", 0)])

    def test_custom_registry(self):
        """Test building a registry from other schemas."""
        registry = ToolRegistry([make_schema("b", 1), make_schema("a", 0)])
        assert registry.names() == ["a", "b"]
        assert registry.lookup("duck") is None
