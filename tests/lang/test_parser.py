"""Tests for the recursive descent parser."""

from __future__ import annotations

from textwrap import dedent

import pytest

from liby.errors import YSyntaxError
from liby.lang.parser import Parser, parse_document
from liby.lang.lexer import TokenKind
from liby.tree import ValueKind


def test_block_with_annotated_child() -> None:
    root = parse_document("foo { bar 42 @flag1 @flag2 }")

    assert root.name == "foo"
    assert root.kind is ValueKind.BLOCK
    assert len(root.children) == 1

    bar = root.children[0]
    assert bar.name == "bar"
    assert bar.kind is ValueKind.INTEGER
    assert bar.value.payload == 42
    assert [note.name for note in bar.notes] == ["flag1", "flag2"]


def test_children_keep_declaration_order_and_links() -> None:
    root = parse_document("list { one two three }")
    one, two, three = root.children

    assert [node.name for node in root.children] == ["one", "two", "three"]
    assert one.next is two
    assert two.next is three
    assert three.next is None
    assert all(child.parent is root for child in root.children)
    assert root.parent is None
    assert root.next is None


def test_nested_parents() -> None:
    root = parse_document("a { b { c 1 } }")
    b = root.children[0]
    c = b.children[0]
    assert c.parent is b
    assert b.parent is root


def test_literal_values() -> None:
    source = dedent(
        """
        values {
          name "Hello, world"
          count 12
          ratio 0.25
          flag
        }
        """
    )
    name, count, ratio, flag = parse_document(source).children

    assert name.kind is ValueKind.STRING
    assert name.value.payload == "Hello, world"
    assert count.kind is ValueKind.INTEGER
    assert count.value.payload == 12
    assert ratio.kind is ValueKind.DECIMAL
    assert ratio.value.payload == 0.25
    assert flag.kind is ValueKind.NONE
    assert flag.value.payload is None


def test_empty_block() -> None:
    root = parse_document("empty { }")
    assert root.kind is ValueKind.BLOCK
    assert root.children == ()


def test_annotations_follow_the_block() -> None:
    root = parse_document("settings { x 1 } @mutable @shared")
    assert [note.name for note in root.notes] == ["mutable", "shared"]
    assert root.children[0].notes == ()


def test_annotations_without_value() -> None:
    root = parse_document("marker @a")
    assert root.kind is ValueKind.NONE
    assert [str(note) for note in root.notes] == ["@a"]


def test_parser_tracks_previous_and_current() -> None:
    parser = Parser("a { b }")
    assert parser.previous.kind is TokenKind.NONE
    assert parser.current.kind is TokenKind.TEXT

    parser.advance()
    assert parser.previous.lexeme == "a"
    assert parser.current.kind is TokenKind.OPEN


class TestSyntaxErrors:
    def test_empty_source(self) -> None:
        with pytest.raises(YSyntaxError) as exc_info:
            parse_document("")
        assert exc_info.value.code == "UNEXPECTED_TOKEN"
        assert exc_info.value.message == "Expected text, received end of input."

    def test_node_must_start_with_text(self) -> None:
        with pytest.raises(YSyntaxError) as exc_info:
            parse_document("{ a }")
        assert exc_info.value.message == "Expected text, received '{'."

    def test_unterminated_block(self) -> None:
        with pytest.raises(YSyntaxError) as exc_info:
            parse_document("a {\n  b 1\n")

        error = exc_info.value
        assert error.code == "UNTERMINATED_BLOCK"
        assert error.message == "Expecting ending to node list."
        assert error.line == 3

    def test_trailing_content(self) -> None:
        with pytest.raises(YSyntaxError) as exc_info:
            parse_document("a 1\nb 2")

        error = exc_info.value
        assert error.code == "UNEXPECTED_TOKEN"
        assert error.message == "Expected end of input, received text."
        assert (error.line, error.column) == (2, 0)

    def test_stray_close(self) -> None:
        with pytest.raises(YSyntaxError) as exc_info:
            parse_document("a }")
        assert exc_info.value.message == "Expected end of input, received '}'."

    def test_block_and_literal_are_exclusive(self) -> None:
        with pytest.raises(YSyntaxError):
            parse_document("a { } 1")

    def test_annotation_needs_a_name(self) -> None:
        with pytest.raises(YSyntaxError) as exc_info:
            parse_document("a @ 1")
        assert exc_info.value.message == "Expected text, received number."

    def test_lexical_errors_surface_through_parser(self) -> None:
        with pytest.raises(YSyntaxError) as exc_info:
            parse_document("a { b 1.2.3 }")
        assert exc_info.value.code == "DUPLICATE_DECIMAL"

    def test_path_is_attached(self) -> None:
        with pytest.raises(YSyntaxError) as exc_info:
            parse_document("a {", path="broken.y")

        error = exc_info.value
        assert error.path == "broken.y"
        assert error.diagnostic.path == "broken.y"
        assert str(error).startswith("File: broken.y | Line 1:3")
