"""Lexical analyzer (tokenizer) for Y sources.

Converts source text into a stream of tokens for parsing. Tokens are
produced one at a time by :meth:`Lexer.next_token`; the parser pulls them
on demand so an error is reported at the first place the input goes wrong.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from liby.errors import YSyntaxError, create_syntax_error
from .diagnostics import Diagnostic

U64_MAX = 2**64 - 1

TokenValue = Union[str, int, float, None]


class TokenKind(Enum):
    """Token kinds for Y sources."""

    NONE = "none"

    # Literals
    TEXT = "text"
    NUMBER = "number"
    STRING = "string"

    # Punctuation
    NOTE = "'@'"
    OPEN = "'{'"
    CLOSE = "'}'"

    END = "end of input"

    @property
    def label(self) -> str:
        return self.value


PUNCTUATION = {
    "@": TokenKind.NOTE,
    "{": TokenKind.OPEN,
    "}": TokenKind.CLOSE,
}


@dataclass(frozen=True)
class Span:
    """Source location of a token: offsets into the source text."""

    line: int
    line_start: int
    begin: int
    end: int


@dataclass(frozen=True)
class Token:
    """A single token with position information."""

    kind: TokenKind
    span: Span
    lexeme: str = ""
    value: TokenValue = None

    @classmethod
    def none(cls) -> "Token":
        return cls(TokenKind.NONE, Span(line=1, line_start=0, begin=0, end=0))

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.lexeme!r}, {self.span.line}:{self.span.begin - self.span.line_start})"


def _is_text_start(char: str) -> bool:
    return char.isascii() and (char.isalpha() or char == "_")


def _is_text_part(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == "_")


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


class Lexer:
    """Tokenizer for Y source text."""

    def __init__(self, source: str, path: str = ""):
        self.source = source
        self.path = path
        self.pos = 0
        self.line = 1
        self.line_start = 0

    def span(self, begin: int, end: int) -> Span:
        return Span(line=self.line, line_start=self.line_start, begin=begin, end=end)

    def error(self, message: str, begin: int, end: int, *, code: str) -> YSyntaxError:
        """Create a lexer error pointing at ``source[begin:end]``."""
        diagnostic = Diagnostic.from_span(self.source, self.span(begin, end), message, self.path)
        return create_syntax_error(diagnostic, code=code)

    def peek(self, offset: int = 0) -> Optional[str]:
        """Peek at character without consuming."""
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return None

    def skip_trivia(self) -> None:
        """Skip whitespace and ``//`` line comments."""
        while True:
            char = self.peek()
            if char == "\n":
                self.pos += 1
                self.line += 1
                self.line_start = self.pos
            elif char in (" ", "\t", "\r"):
                self.pos += 1
            elif char == "/" and self.peek(1) == "/":
                # Stop on the newline so the branch above counts it.
                while self.peek() not in (None, "\n"):
                    self.pos += 1
            else:
                return

    def make_token(self, kind: TokenKind, begin: int, end: int, value: TokenValue = None) -> Token:
        return Token(kind=kind, span=self.span(begin, end), lexeme=self.source[begin:end], value=value)

    def read_string(self) -> Token:
        """Read a string literal; the value is the raw interior text."""
        begin = self.pos
        self.pos += 1  # opening quote
        while True:
            char = self.peek()
            if char is None:
                raise self.error("Unterminated string literal.", begin, self.pos, code="UNTERMINATED_STRING")
            if char == "\n":
                raise self.error("Strings can not contain a new line.", self.pos, self.pos + 1, code="UNTERMINATED_STRING")
            if char == '"':
                break
            self.pos += 1
        self.pos += 1  # closing quote
        return self.make_token(TokenKind.STRING, begin, self.pos, self.source[begin + 1:self.pos - 1])

    def read_text(self) -> Token:
        """Read a name."""
        begin = self.pos
        while self.peek() is not None and _is_text_part(self.peek()):
            self.pos += 1
        return self.make_token(TokenKind.TEXT, begin, self.pos, self.source[begin:self.pos])

    def read_number(self) -> Token:
        """Read an integer or decimal literal; ``_`` separates digits."""
        begin = self.pos
        decimal = False
        while True:
            char = self.peek()
            if char is None or not (_is_digit(char) or char in "_."):
                break
            if char == ".":
                if decimal:
                    raise self.error(
                        "Duplicate floating-point decimal in number.",
                        self.pos,
                        self.pos + 1,
                        code="DUPLICATE_DECIMAL",
                    )
                decimal = True
            self.pos += 1

        digits = self.source[begin:self.pos].replace("_", "")
        if decimal:
            return self.make_token(TokenKind.NUMBER, begin, self.pos, float(digits))

        value = int(digits)
        if value > U64_MAX:
            raise self.error("Integer literal does not fit in 64 bits.", begin, self.pos, code="INTEGER_OVERFLOW")
        return self.make_token(TokenKind.NUMBER, begin, self.pos, value)

    def next_token(self) -> Token:
        """Lex and return the next token; END repeats once input is exhausted."""
        self.skip_trivia()

        if self.pos >= len(self.source):
            return self.make_token(TokenKind.END, self.pos, self.pos)

        char = self.source[self.pos]

        if char in PUNCTUATION:
            self.pos += 1
            return self.make_token(PUNCTUATION[char], self.pos - 1, self.pos)

        if char == '"':
            return self.read_string()

        if _is_text_start(char):
            return self.read_text()

        if _is_digit(char):
            return self.read_number()

        raise self.error(
            f"Unknown character: {char} ({ord(char)})",
            self.pos,
            self.pos + 1,
            code="UNKNOWN_CHARACTER",
        )

    def tokenize(self) -> List[Token]:
        """Tokenize the remaining source, END token included."""
        tokens = [self.next_token()]
        while tokens[-1].kind is not TokenKind.END:
            tokens.append(self.next_token())
        return tokens


def tokenize(source: str, path: str = "") -> List[Token]:
    """Tokenize Y source text."""
    return Lexer(source, path).tokenize()


__all__ = ["Span", "Token", "TokenKind", "Lexer", "tokenize", "U64_MAX"]
