"""Read-only queries over parsed trees.

- :func:`find` resolves a whitespace separated path of names.
- :func:`has` looks up an annotation by name.
- :func:`iterate` walks the siblings that follow a list head.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .errors import YPathError, YSyntaxError
from .lang.lexer import TokenKind, tokenize
from .observability import get_logger
from .tree import Annotation, Node

logger = get_logger("liby.query")

QUERY_PATH = "<query>"


def _scan(siblings: Sequence[Node], name: str) -> Optional[Node]:
    for node in siblings:
        if node.name == name:
            return node
    return None


def find(roots: Sequence[Node], path: str) -> Optional[Node]:
    """Return the node named by ``path``, or ``None``.

    ``path`` is lexed like source text, so each segment must be a valid
    name. Matching starts among ``roots`` and descends one block per
    segment. Empty paths, paths with anything other than names, and paths
    that fail to lex find nothing.

    Raises:
        YPathError: If a segment other than the last names a node that
            is not a block.
    """
    try:
        tokens = tokenize(path, QUERY_PATH)
    except YSyntaxError as exc:
        logger.debug("Path %r does not tokenize: %s", path, exc.message)
        return None

    segments = tokens[:-1]
    if not segments or any(token.kind is not TokenKind.TEXT for token in segments):
        logger.debug("Path %r is not a sequence of names", path)
        return None

    siblings = roots
    last = len(segments) - 1
    for index, segment in enumerate(segments):
        node = _scan(siblings, segment.value)
        if node is None:
            logger.debug("Path %r: no node named %r", path, segment.value)
            return None
        if index == last:
            return node
        if not node.is_block:
            raise YPathError(
                message=f"Path descends into non-container node '{node.name}' ({node.kind}).",
                path=path,
                line=segment.span.line,
                column=segment.span.begin - segment.span.line_start,
                segment=segment.value,
            )
        siblings = node.children
    return None


def has(node: Node, name: str) -> Optional[Annotation]:
    """Return the annotation called ``name`` on ``node``, or ``None``."""
    for note in node.notes:
        if note.name == name:
            return note
    return None


@dataclass
class SiblingCursor:
    """Position slot for :func:`iterate`; starts empty."""

    node: Optional[Node] = None


def iterate(head: Optional[Node], cursor: SiblingCursor) -> Optional[Node]:
    """Advance ``cursor`` to the next sibling and return it.

    The first call starts at ``head`` and returns the sibling after it, so
    ``head`` itself is never returned; callers handle it before iterating.
    Returns ``None`` once the list is exhausted.
    """
    if cursor.node is None:
        if head is None:
            return None
        cursor.node = head

    if cursor.node.next is None:
        return None

    cursor.node = cursor.node.next
    return cursor.node


__all__ = ["find", "has", "iterate", "SiblingCursor"]
