"""
liby: a small declarative configuration language.

A Y file is a tree of named nodes::

    settings {
      graphics {
        vsync 1 @locked
        refresh 59.94
      }
      title "Untitled"
    } @mutable

Every node carries at most one value (a block of child nodes, a string, an
integer or a decimal) and any number of ``@`` annotations. Documents are
loaded into a :class:`Context`, whose roots form one flat forest that
:meth:`Context.find` searches with paths such as ``"settings graphics vsync"``.
"""

from importlib import metadata as _metadata

from .context import Context, DocumentUnit
from .errors import YError, YLoadError, YPathError, YSyntaxError
from .lang import LANGUAGE_VERSION, parse_document
from .query import SiblingCursor, find, has, iterate
from .tree import Annotation, Node, Value, ValueKind

try:  # pragma: no cover - metadata fallback for source trees
    __version__ = _metadata.version("liby")
except _metadata.PackageNotFoundError:  # pragma: no cover - source tree
    __version__ = "0.1.0"

__all__ = [
    "__version__",
    "LANGUAGE_VERSION",
    "Context",
    "DocumentUnit",
    "YError",
    "YLoadError",
    "YPathError",
    "YSyntaxError",
    "parse_document",
    "SiblingCursor",
    "find",
    "has",
    "iterate",
    "Annotation",
    "Node",
    "Value",
    "ValueKind",
]
