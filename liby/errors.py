"""Unified error handling for liby.

This module provides structured error types with:
- Line numbers and column positions
- The rendered source diagnostic for lexical and syntax errors
- Error codes for programmatic handling
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .lang.diagnostics import Diagnostic


@dataclass
class YError(Exception):
    """Base class for all liby errors."""

    message: str
    path: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None
    code: str = "Y_ERROR"

    def __str__(self) -> str:
        """Format error message with location."""
        parts = []

        if self.path:
            parts.append(f"File: {self.path}")

        if self.line is not None:
            if self.column is not None:
                parts.append(f"Line {self.line}:{self.column}")
            else:
                parts.append(f"Line {self.line}")

        parts.append(f"[{self.code}] {self.message}")

        return " | ".join(parts)


@dataclass
class YSyntaxError(YError):
    """Lexical or syntax error carrying its source diagnostic.

    Codes: ``UNKNOWN_CHARACTER``, ``UNTERMINATED_STRING``,
    ``DUPLICATE_DECIMAL``, ``INTEGER_OVERFLOW``, ``UNTERMINATED_BLOCK``,
    ``UNEXPECTED_TOKEN``.
    """

    diagnostic: Optional["Diagnostic"] = None
    code: str = "SYNTAX_ERROR"


@dataclass
class YPathError(YError):
    """A path query tried to descend into a node that has no children."""

    segment: Optional[str] = None
    code: str = "PATH_ERROR"

    def __str__(self) -> str:
        base = super().__str__()
        if self.segment:
            return f"{base}\n  Segment: {self.segment}"
        return base


@dataclass
class YLoadError(YError):
    """A source file could not be opened or read."""

    code: str = "LOAD_ERROR"


def create_syntax_error(diagnostic: "Diagnostic", *, code: str) -> YSyntaxError:
    """Create a syntax error from a diagnostic."""
    return YSyntaxError(
        message=diagnostic.message,
        path=diagnostic.path,
        line=diagnostic.line,
        column=diagnostic.column,
        code=code,
        diagnostic=diagnostic,
    )


__all__ = [
    "YError",
    "YSyntaxError",
    "YPathError",
    "YLoadError",
    "create_syntax_error",
]
