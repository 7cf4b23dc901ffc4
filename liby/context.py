"""Loading Y documents into a shared context.

The top-level node of every loaded document joins one flat forest: roots
are chained through ``next`` in load order, whichever file they came from.
A context is not thread-safe; ``load`` mutates the forest tail and the
document registry.
"""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterator, List, Optional

from .config import LibySettings
from .errors import YLoadError
from .lang.parser import parse_document
from .observability import get_logger
from .query import find as find_path
from .tree import Node

logger = get_logger("liby.context")


@dataclass
class DocumentUnit:
    """One loaded source: its path, text and root node."""

    path: str
    source: str
    root: Node


class Context:
    """Owner of loaded documents and the forest of their roots."""

    def __init__(self, settings: Optional[LibySettings] = None) -> None:
        self.settings = settings or LibySettings()
        self.documents: List[DocumentUnit] = []
        self.roots: List[Node] = []

    def __enter__(self) -> "Context":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __iter__(self) -> Iterator[Node]:
        return iter(self.roots)

    def __len__(self) -> int:
        return len(self.roots)

    @property
    def head(self) -> Optional[Node]:
        """First root of the forest, the list head for :func:`liby.query.iterate`."""
        return self.roots[0] if self.roots else None

    def load(self, path: str | PathLike[str]) -> Node:
        """Read, parse and add the document at ``path``; return its root.

        Raises:
            YLoadError: If ``path`` is not a readable regular file
            YSyntaxError: If the document has lexical or syntax errors
        """
        source_path = Path(path)
        if not source_path.is_file():
            raise YLoadError(message=f"Cannot open '{source_path}': not a regular file.", path=str(source_path))
        try:
            source = source_path.read_text(encoding=self.settings.encoding)
        except (OSError, UnicodeError, LookupError) as exc:
            raise YLoadError(message=f"Cannot read '{source_path}': {exc}", path=str(source_path)) from exc
        return self.load_text(source, path=str(source_path))

    def load_text(self, source: str, path: str = "<string>") -> Node:
        """Parse ``source`` and add its root to the forest."""
        root = parse_document(source, path=path)
        if self.roots:
            self.roots[-1].next = root
        self.roots.append(root)
        self.documents.append(DocumentUnit(path=path, source=source, root=root))
        logger.debug("Loaded %s (root %r, %d document(s))", path, root.name, len(self.documents))
        return root

    def find(self, path: str) -> Optional[Node]:
        """Resolve a whitespace separated name path against the forest."""
        return find_path(self.roots, path)

    def close(self) -> None:
        """Drop every document and the forest."""
        logger.debug("Releasing %d document(s)", len(self.documents))
        self.documents.clear()
        self.roots.clear()


__all__ = ["Context", "DocumentUnit"]
