"""Tests for path queries, annotation lookup and sibling iteration."""

from __future__ import annotations

import pytest

from liby.errors import YPathError
from liby.lang.parser import parse_document
from liby.query import SiblingCursor, find, has, iterate
from liby.tree import ValueKind


@pytest.fixture
def forest():
    return [parse_document("a { b { c 1 } d \"text\" }")]


class TestFind:
    def test_full_path(self, forest) -> None:
        node = find(forest, "a b c")
        assert node.name == "c"
        assert node.kind is ValueKind.INTEGER
        assert node.value.payload == 1

    def test_last_segment_may_be_a_block(self, forest) -> None:
        node = find(forest, "a b")
        assert node.name == "b"
        assert node.kind is ValueKind.BLOCK

    def test_root_only(self, forest) -> None:
        assert find(forest, "a") is forest[0]

    def test_extra_whitespace_and_comments(self, forest) -> None:
        assert find(forest, "  a\tb\n c // trailing").name == "c"

    @pytest.mark.parametrize("path", ["a x", "x", "b", "a b x"])
    def test_missing_segment(self, forest, path: str) -> None:
        assert find(forest, path) is None

    @pytest.mark.parametrize("path", ["", "   ", "// only a comment"])
    def test_empty_path(self, forest, path: str) -> None:
        assert find(forest, path) is None

    @pytest.mark.parametrize("path", ["a 1", "a { b", "a @b", '"a"'])
    def test_non_name_tokens(self, forest, path: str) -> None:
        assert find(forest, path) is None

    @pytest.mark.parametrize("path", ["a $", "a.b", 'a "b'])
    def test_path_that_fails_to_tokenize(self, forest, path: str) -> None:
        assert find(forest, path) is None

    def test_descending_into_leaf_raises(self, forest) -> None:
        with pytest.raises(YPathError) as exc_info:
            find(forest, "a d more")

        error = exc_info.value
        assert error.segment == "d"
        assert error.code == "PATH_ERROR"
        assert "non-container" in error.message

    def test_path_error_location_is_line_relative(self, forest) -> None:
        with pytest.raises(YPathError) as exc_info:
            find(forest, "a\n  d more")

        assert exc_info.value.line == 2
        assert exc_info.value.column == 2
        assert "Line 2:2" in str(exc_info.value)

    def test_exact_name_match(self) -> None:
        roots = [parse_document("group { ab 1 abc 2 }")]
        assert find(roots, "group abc").value.payload == 2
        assert find(roots, "group a") is None

    def test_first_match_wins(self) -> None:
        roots = [parse_document("group { dup 1 dup 2 }")]
        assert find(roots, "group dup").value.payload == 1

    def test_empty_forest(self) -> None:
        assert find([], "a") is None


class TestHas:
    def test_annotations(self) -> None:
        root = parse_document("foo { bar 42 @flag1 @flag2 }")
        bar = find([root], "foo bar")

        assert bar.value.payload == 42
        assert has(bar, "flag1").name == "flag1"
        assert has(bar, "flag2") is bar.notes[1]
        assert has(bar, "flag3") is None

    def test_no_annotations(self) -> None:
        assert has(parse_document("plain"), "flag") is None

    def test_exact_match(self) -> None:
        node = parse_document("x @flag")
        assert has(node, "fla") is None
        assert has(node, "flags") is None


class TestIterate:
    def test_head_is_never_yielded(self) -> None:
        n1, n2, n3 = parse_document("list { n1 n2 n3 }").children
        cursor = SiblingCursor()

        assert iterate(n1, cursor) is n2
        assert iterate(n1, cursor) is n3
        assert iterate(n1, cursor) is None
        assert iterate(n1, cursor) is None

    def test_single_node_list(self) -> None:
        (only,) = parse_document("list { only }").children
        cursor = SiblingCursor()

        assert iterate(only, cursor) is None
        assert cursor.node is only

    def test_empty_list(self) -> None:
        assert iterate(None, SiblingCursor()) is None

    def test_cursor_tracks_position(self) -> None:
        n1, n2, _ = parse_document("list { n1 n2 n3 }").children
        cursor = SiblingCursor()
        iterate(n1, cursor)
        assert cursor.node is n2

    def test_loop_idiom(self) -> None:
        head = parse_document("list { a b c d }").children[0]
        cursor = SiblingCursor()

        names = [head.name]
        node = iterate(head, cursor)
        while node is not None:
            names.append(node.name)
            node = iterate(head, cursor)

        assert names == ["a", "b", "c", "d"]

    def test_siblings_generator_includes_head(self) -> None:
        head = parse_document("list { a b c }").children[0]
        assert [node.name for node in head.siblings()] == ["a", "b", "c"]
