"""Y language front end: lexer, parser and diagnostics.

Public API:
    tokenize(source, path) -> List[Token]
    parse_document(source, path) -> Node
    Lexer, Parser - the underlying classes
"""

from .diagnostics import Diagnostic, abort, format_diagnostic, render_diagnostic, report
from .lexer import Lexer, Span, Token, TokenKind, tokenize
from .parser import Parser, parse_document

LANGUAGE_VERSION = "0.1"

__all__ = [
    "LANGUAGE_VERSION",
    "Diagnostic",
    "abort",
    "format_diagnostic",
    "render_diagnostic",
    "report",
    "Lexer",
    "Span",
    "Token",
    "TokenKind",
    "tokenize",
    "Parser",
    "parse_document",
]
