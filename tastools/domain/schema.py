"""Declarative argument grammar for TAS tools.

A ToolSchema describes the legal argument shapes of one tool as a tree of
ArgumentNodes. Each node is either a keyword (fixed `text`) or a value slot
(a number or a word), and may carry two alternative child lists:

- `children` are consumed right after the node, only if the node matched
  (a keyword taking parameters, e.g. "autoaim ent <entity>")
- `otherwise_children` are consumed instead, only if it did not match
  (e.g. autoaim takes either an entity or a coordinate)

Matched values are bound into a flat slot list: one slot per node in
pre-order (node, its children, then its otherwise_children). A schema's
`duration_index` points into that list.
"""

from __future__ import annotations

from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .tokens import TokenKind

# duration_index sentinel: the tool runs until turned off or replaced
NO_DURATION = -1

EASING_TYPES: frozenset[str] = frozenset({"cubic", "exp", "exponential", "linear", "sin", "sine"})


class ArgumentNode(BaseModel):
    """One argument slot of a tool grammar."""

    model_config = ConfigDict(frozen=True)

    kind: TokenKind
    required: bool = False
    text: str | None = None
    unit: str | None = None  # Trailing '?' makes the suffix optional (e.g. "deg?")
    description: str | None = None
    children: tuple[ArgumentNode, ...] = ()
    otherwise_children: tuple[ArgumentNode, ...] = ()

    # Binding and constraints
    key: str | None = None
    choices: frozenset[str] | None = None
    integer: bool = False
    minimum: float | None = None
    maximum: float | None = None
    group: str | None = None  # Unordered mode: at most one node per group

    @model_validator(mode="after")
    def check_shape(self) -> ArgumentNode:
        if self.text is not None and self.kind is not TokenKind.STRING:
            raise ValueError(f"keyword '{self.text}' must be a string node")
        if self.kind is TokenKind.STRING:
            if self.unit is not None or self.integer or self.minimum is not None or self.maximum is not None:
                raise ValueError("numeric constraints on a string node")
        if self.choices is not None and (self.kind is not TokenKind.STRING or self.text is not None):
            raise ValueError("choices are only valid on string value nodes")
        if self.minimum is not None and self.maximum is not None and self.minimum > self.maximum:
            raise ValueError(f"minimum {self.minimum} > maximum {self.maximum}")
        return self

    @property
    def is_keyword(self) -> bool:
        return self.text is not None

    @property
    def unit_name(self) -> str | None:
        """Unit suffix without the optional marker."""
        if self.unit is None:
            return None
        return self.unit.rstrip("?")

    @property
    def unit_optional(self) -> bool:
        return self.unit is not None and self.unit.endswith("?")

    @property
    def size(self) -> int:
        """Number of slots this node occupies, itself included."""
        return 1 + slot_count(self.children) + slot_count(self.otherwise_children)

    def label(self) -> str:
        """Short human-readable name for error messages."""
        if self.text is not None:
            return f"'{self.text}'"
        if self.key is not None:
            return f"<{self.key}>"
        if self.kind is TokenKind.NUMBER:
            return f"<number{':' + self.unit_name if self.unit_name else ''}>"
        return "<word>"


def slot_count(nodes: tuple[ArgumentNode, ...]) -> int:
    return sum(node.size for node in nodes)


def iter_slots(nodes: tuple[ArgumentNode, ...]) -> Iterator[ArgumentNode]:
    """Yield nodes in slot (pre-order) order."""
    for node in nodes:
        yield node
        yield from iter_slots(node.children)
        yield from iter_slots(node.otherwise_children)


class ToolSchema(BaseModel):
    """Grammar and execution metadata for one tool."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    fixed_order: bool
    has_off: bool
    registers_active_state: bool
    duration_index: int = NO_DURATION
    arguments: tuple[ArgumentNode, ...] = ()
    expects_arguments: bool
    allow_arbitrary_arguments: bool = False
    priority_index: int = Field(ge=0)
    description: str = ""
    stops_all_tools: bool = False

    @model_validator(mode="after")
    def check_duration_slot(self) -> ToolSchema:
        if self.duration_index == NO_DURATION:
            return self
        slots = self.slots()
        if not 0 <= self.duration_index < len(slots):
            raise ValueError(
                f"{self.name}: duration_index {self.duration_index} outside {len(slots)} slots"
            )
        node = slots[self.duration_index]
        if node.kind is not TokenKind.NUMBER:
            raise ValueError(f"{self.name}: duration slot {self.duration_index} is not numeric")
        return self

    def slots(self) -> tuple[ArgumentNode, ...]:
        return tuple(iter_slots(self.arguments))

    @property
    def slot_count(self) -> int:
        return slot_count(self.arguments)

    @property
    def has_duration(self) -> bool:
        return self.duration_index != NO_DURATION

    def key_index(self, key: str) -> int | None:
        """Slot index of the node bound under `key`."""
        for index, node in enumerate(self.slots()):
            if node.key == key:
                return index
        return None


# =============================================================================
# Node constructors (keep the catalogue readable)
# =============================================================================


def keyword(
    text: str,
    *,
    required: bool = False,
    description: str | None = None,
    children: tuple[ArgumentNode, ...] = (),
    otherwise: tuple[ArgumentNode, ...] = (),
    group: str | None = None,
) -> ArgumentNode:
    """A literal keyword argument."""
    return ArgumentNode(
        kind=TokenKind.STRING,
        required=required,
        text=text,
        description=description,
        children=children,
        otherwise_children=otherwise,
        group=group,
    )


def number(
    *,
    required: bool = False,
    unit: str | None = None,
    key: str | None = None,
    integer: bool = False,
    minimum: float | None = None,
    maximum: float | None = None,
    description: str | None = None,
    children: tuple[ArgumentNode, ...] = (),
    otherwise: tuple[ArgumentNode, ...] = (),
    group: str | None = None,
) -> ArgumentNode:
    """A numeric value argument."""
    return ArgumentNode(
        kind=TokenKind.NUMBER,
        required=required,
        unit=unit,
        key=key,
        integer=integer,
        minimum=minimum,
        maximum=maximum,
        description=description,
        children=children,
        otherwise_children=otherwise,
        group=group,
    )


def word(
    *,
    required: bool = False,
    key: str | None = None,
    choices: frozenset[str] | None = None,
    description: str | None = None,
    otherwise: tuple[ArgumentNode, ...] = (),
) -> ArgumentNode:
    """A free-form (or closed-choice) word argument."""
    return ArgumentNode(
        kind=TokenKind.STRING,
        required=required,
        key=key,
        choices=choices,
        description=description,
        otherwise_children=otherwise,
    )


def ticks(*, key: str = "duration", description: str | None = None) -> ArgumentNode:
    """An optional duration in whole ticks."""
    return number(key=key, integer=True, minimum=1, description=description)
