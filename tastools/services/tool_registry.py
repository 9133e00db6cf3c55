"""
Tool registry - read-only lookup of tool schemas by name.

Populated once from the fixed catalogue. Names are case-sensitive and
unique; a malformed catalogue is a programming error and raises
CatalogueError at construction time.
"""

import logging
from typing import Iterable, Iterator

from tastools.domain import CATALOGUE, CatalogueError, ToolSchema


logger = logging.getLogger(__name__)


class ToolRegistry:
    """
    Registry of every tool a script may invoke.

    Provides:
    - Schema lookup by name
    - Iteration in execution (priority) order
    """

    def __init__(self, schemas: Iterable[ToolSchema]):
        self._schemas: dict[str, ToolSchema] = {}
        priorities: dict[int, str] = {}

        for schema in schemas:
            if schema.name in self._schemas:
                raise CatalogueError(f"Duplicate tool: {schema.name}")
            if schema.priority_index in priorities:
                raise CatalogueError(
                    f"Tools '{priorities[schema.priority_index]}' and '{schema.name}' "
                    f"share priority index {schema.priority_index}"
                )
            self._schemas[schema.name] = schema
            priorities[schema.priority_index] = schema.name

        logger.debug(f"Tool registry loaded | {len(self._schemas)} tools")

    def lookup(self, name: str) -> ToolSchema | None:
        """Get a tool schema by name."""
        return self._schemas.get(name)

    def names(self) -> list[str]:
        """Get all tool names in execution order."""
        return [schema.name for schema in self.by_priority()]

    def by_priority(self) -> list[ToolSchema]:
        """Get all schemas sorted by priority index (lowest runs first)."""
        return sorted(self._schemas.values(), key=lambda s: s.priority_index)

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)

    def __iter__(self) -> Iterator[ToolSchema]:
        return iter(self.by_priority())


# Process-wide registry, never mutated after import
TOOL_REGISTRY = ToolRegistry(CATALOGUE)


def lookup(name: str) -> ToolSchema | None:
    """Look up a schema in the process-wide registry."""
    return TOOL_REGISTRY.lookup(name)
