"""Source diagnostics for fatal lexical and syntax errors.

A :class:`Diagnostic` is a plain value. Formatting and rendering are pure;
only :func:`abort` terminates, and only the top-level caller should use it.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, NoReturn, Optional

from rich.console import Console
from rich.text import Text

if TYPE_CHECKING:
    from liby.config import LibySettings
    from liby.errors import YError
    from .lexer import Span

FATAL_STYLE = "bold red"


@dataclass(frozen=True)
class Diagnostic:
    """A located error message with the source line it points into."""

    line: int
    column: int
    length: int
    source_line: str
    message: str
    path: Optional[str] = None

    @property
    def end_column(self) -> int:
        return self.column + self.length

    @property
    def padding(self) -> str:
        """Blank text as wide as the line up to the span; tabs are kept so markers align."""
        prefix = self.source_line[: self.column]
        blank = "".join("\t" if char == "\t" else " " for char in prefix)
        return blank + " " * (self.column - len(prefix))

    @property
    def location(self) -> str:
        if self.path:
            return f"{self.path}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"

    @classmethod
    def from_span(cls, source: str, span: "Span", message: str, path: Optional[str] = None) -> "Diagnostic":
        line_end = source.find("\n", span.line_start)
        if line_end == -1:
            line_end = len(source)
        return cls(
            line=span.line,
            column=span.begin - span.line_start,
            length=span.end - span.begin,
            source_line=source[span.line_start:line_end].rstrip("\r"),
            message=message,
            path=path or None,
        )


def format_diagnostic(diagnostic: Diagnostic, *, gutter_width: int = 4, marker: str = "^") -> str:
    """Format a diagnostic as plain text.

    Example::

        liby fatal settings.y:2:9:
           2 | version 1.2.3
             |          ^ Duplicate floating-point decimal in number.
    """
    gutter = " " * gutter_width
    lines = [
        f"liby fatal {diagnostic.location}:",
        f"{diagnostic.line:>{gutter_width}} | {diagnostic.source_line}",
        f"{gutter} | {diagnostic.padding}{marker * diagnostic.length} {diagnostic.message}",
    ]
    return "\n".join(lines)


def render_diagnostic(diagnostic: Diagnostic, *, gutter_width: int = 4, marker: str = "^") -> Text:
    """Same layout as :func:`format_diagnostic` with the offending span highlighted."""
    source_line = diagnostic.source_line
    begin = min(diagnostic.column, len(source_line))
    end = min(diagnostic.end_column, len(source_line))
    gutter = " " * gutter_width

    text = Text()
    text.append("liby ")
    text.append("fatal", style=FATAL_STYLE)
    text.append(f" {diagnostic.location}:\n")
    text.append(f"{diagnostic.line:>{gutter_width}} | ")
    text.append(source_line[:begin])
    text.append(source_line[begin:end], style=FATAL_STYLE)
    text.append(source_line[end:])
    text.append(f"\n{gutter} | {diagnostic.padding}")
    text.append(marker * diagnostic.length, style=FATAL_STYLE)
    text.append(f" {diagnostic.message}")
    return text


def _stderr_console(settings: Optional["LibySettings"]) -> Console:
    if settings is None:
        return Console(stderr=True)
    return Console(stderr=True, no_color=not settings.color)


def report(
    diagnostic: Diagnostic,
    console: Optional[Console] = None,
    settings: Optional["LibySettings"] = None,
) -> None:
    """Print a rendered diagnostic, to stderr unless a console is given."""
    target = console or _stderr_console(settings)
    options = {}
    if settings is not None:
        options = {"gutter_width": settings.gutter_width, "marker": settings.marker}
    target.print(render_diagnostic(diagnostic, **options), highlight=False, soft_wrap=True)


def abort(
    error: "YError",
    console: Optional[Console] = None,
    settings: Optional["LibySettings"] = None,
) -> NoReturn:
    """Report ``error`` and exit with status 1."""
    diagnostic = getattr(error, "diagnostic", None)
    if diagnostic is not None:
        report(diagnostic, console, settings)
    else:
        target = console or _stderr_console(settings)
        target.print(Text(str(error), style=FATAL_STYLE), highlight=False, soft_wrap=True)
    sys.exit(1)


__all__ = ["Diagnostic", "format_diagnostic", "render_diagnostic", "report", "abort"]
