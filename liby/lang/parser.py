"""Recursive descent parser for Y sources.

Grammar::

    unit  := node END
    node  := TEXT ( block | NUMBER | STRING )? note*
    block := '{' node* '}'
    note  := '@' TEXT
"""

from __future__ import annotations
from typing import List, Optional, Tuple

from liby.errors import YSyntaxError, create_syntax_error
from liby.tree import Annotation, Node, Value
from .diagnostics import Diagnostic
from .lexer import Lexer, Token, TokenKind


class Parser:
    """Parser holding one token of lookahead plus the last consumed token."""

    def __init__(self, source: str, *, path: str = ""):
        self.source = source
        self.path = path
        self.lexer = Lexer(source, path)
        self.previous = Token.none()
        self.current = Token.none()
        self.advance()

    # ====================================================================
    # Token Management
    # ====================================================================

    def advance(self) -> Token:
        """Shift current into previous, lex a new current, return previous."""
        self.previous = self.current
        self.current = self.lexer.next_token()
        return self.previous

    def match(self, *kinds: TokenKind) -> bool:
        return self.current.kind in kinds

    def consume_if(self, *kinds: TokenKind) -> Optional[Token]:
        """Consume the current token if it matches any of the given kinds."""
        if self.match(*kinds):
            return self.advance()
        return None

    def expect(self, kind: TokenKind) -> Token:
        """Consume a token of ``kind`` or fail at the current token."""
        if self.match(kind):
            return self.advance()
        raise self.error_at(
            self.current,
            f"Expected {kind.label}, received {self.current.kind.label}.",
            code="UNEXPECTED_TOKEN",
        )

    def error_at(self, token: Token, message: str, *, code: str) -> YSyntaxError:
        diagnostic = Diagnostic.from_span(self.source, token.span, message, self.path)
        return create_syntax_error(diagnostic, code=code)

    # ====================================================================
    # Grammar
    # ====================================================================

    def parse(self) -> Node:
        """Parse a whole unit: one node followed by the end of input."""
        node = self.parse_node()
        self.expect(TokenKind.END)
        return node

    def parse_node(self, parent: Optional[Node] = None) -> Node:
        name = self.expect(TokenKind.TEXT)
        node = Node(name=name.value, parent=parent)

        if self.consume_if(TokenKind.OPEN):
            node.value = Value.block(self.parse_block(node))
        else:
            literal = self.consume_if(TokenKind.NUMBER, TokenKind.STRING)
            if literal is not None:
                node.value = self.literal_value(literal)

        node.notes = self.parse_notes()
        return node

    def parse_block(self, parent: Node) -> List[Node]:
        children: List[Node] = []
        while not self.consume_if(TokenKind.CLOSE):
            end = self.consume_if(TokenKind.END)
            if end is not None:
                raise self.error_at(end, "Expecting ending to node list.", code="UNTERMINATED_BLOCK")

            child = self.parse_node(parent)
            if children:
                children[-1].next = child
            children.append(child)
        return children

    def parse_notes(self) -> Tuple[Annotation, ...]:
        notes = []
        while self.consume_if(TokenKind.NOTE):
            notes.append(Annotation(self.expect(TokenKind.TEXT).value))
        return tuple(notes)

    @staticmethod
    def literal_value(token: Token) -> Value:
        if token.kind is TokenKind.STRING:
            return Value.string(token.value)
        if isinstance(token.value, float):
            return Value.decimal(token.value)
        return Value.integer(token.value)


def parse_document(source: str, path: str = "") -> Node:
    """Parse Y source text into its root node.

    Raises:
        YSyntaxError: If the source has lexical or syntax errors
    """
    return Parser(source, path=path).parse()


__all__ = ["Parser", "parse_document"]
