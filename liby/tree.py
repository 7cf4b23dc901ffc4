"""Tree model produced by the parser.

A document is a tree of :class:`Node` objects. Every node has a name, an
ordered tuple of :class:`Annotation` markers and exactly one :class:`Value`.
Children live inside a block value; ``parent`` and ``next`` are non-owning
links kept for upward and sideways navigation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Sequence, Tuple, Union


class ValueKind(Enum):
    """Kinds of node payloads."""

    NONE = "none"
    BLOCK = "block"
    STRING = "string"
    INTEGER = "integer"
    DECIMAL = "decimal"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Value:
    """Tagged node payload, fixed at construction."""

    kind: ValueKind = ValueKind.NONE
    payload: Union[Tuple["Node", ...], str, int, float, None] = None

    @classmethod
    def none(cls) -> "Value":
        return cls()

    @classmethod
    def block(cls, children: Sequence["Node"]) -> "Value":
        return cls(ValueKind.BLOCK, tuple(children))

    @classmethod
    def string(cls, text: str) -> "Value":
        return cls(ValueKind.STRING, text)

    @classmethod
    def integer(cls, number: int) -> "Value":
        return cls(ValueKind.INTEGER, number)

    @classmethod
    def decimal(cls, number: float) -> "Value":
        return cls(ValueKind.DECIMAL, number)

    @property
    def children(self) -> Tuple["Node", ...]:
        if self.kind is ValueKind.BLOCK:
            return self.payload  # type: ignore[return-value]
        return ()


@dataclass(frozen=True)
class Annotation:
    """A name-only marker attached to a node (``@name``)."""

    name: str

    def __str__(self) -> str:
        return f"@{self.name}"


@dataclass(eq=False)
class Node:
    """A named tree element with an optional value and annotations."""

    name: str
    notes: Tuple[Annotation, ...] = ()
    value: Value = field(default_factory=Value.none)
    parent: Optional["Node"] = field(default=None, repr=False)
    next: Optional["Node"] = field(default=None, repr=False)

    @property
    def kind(self) -> ValueKind:
        return self.value.kind

    @property
    def children(self) -> Tuple["Node", ...]:
        return self.value.children

    @property
    def is_block(self) -> bool:
        return self.value.kind is ValueKind.BLOCK

    def siblings(self) -> Iterator["Node"]:
        """Yield this node and every following sibling."""
        node: Optional[Node] = self
        while node is not None:
            yield node
            node = node.next


__all__ = ["ValueKind", "Value", "Annotation", "Node"]
