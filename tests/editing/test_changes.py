"""Tests for the change stream adapter."""

import pytest

from hunk_patcher.editing.changes import (
    Change, ChangeTag, diff_changes, line_diff, split_lines, strip_terminator,
    to_changes,
)
from hunk_patcher.editing.errors import InvalidChange


class TestSplitLines:
    def test_keeps_terminators(self):
        assert split_lines("a\nb\n") == ["a\n", "b\n"]

    def test_last_line_without_newline(self):
        assert split_lines("a\nb") == ["a\n", "b"]

    def test_empty_text(self):
        assert split_lines("") == []

    def test_crlf_stays_in_line(self):
        assert split_lines("a\r\nb\r\n") == ["a\r\n", "b\r\n"]

    def test_only_splits_on_newline(self):
        text = "page\x0cbreak\nnext line\n"
        assert split_lines(text) == ["page\x0cbreak\n", "next line\n"]
        assert "".join(split_lines(text)) == text

    def test_strip_terminator(self):
        assert strip_terminator("a\r\n") == "a"
        assert strip_terminator("a\n") == "a"
        assert strip_terminator("a") == "a"


class TestLineDiff:
    def test_identical_texts_are_all_equal(self):
        raw = line_diff("a\nb\n", "a\nb\n")
        assert raw == [("equal", 0, 0, "a\n"), ("equal", 1, 1, "b\n")]

    def test_replacement_lists_deletes_before_inserts(self):
        raw = line_diff("a\nb\nc\n", "a\nB\nc\n")
        assert raw == [
            ("equal", 0, 0, "a\n"),
            ("delete", 1, None, "b\n"),
            ("insert", None, 1, "B\n"),
            ("equal", 2, 2, "c\n"),
        ]

    def test_pure_insertion(self):
        raw = line_diff("", "x\ny\n")
        assert raw == [("insert", None, 0, "x\n"), ("insert", None, 1, "y\n")]

    def test_missing_final_newline_is_a_change(self):
        raw = line_diff("a\nb", "a\nb\n")
        tags = [entry[0] for entry in raw]
        assert tags == ["equal", "delete", "insert"]


class TestToChanges:
    def test_types_raw_entries(self):
        changes = to_changes([("equal", 0, 0, "a\n"), ("insert", None, 1, "b\n")])
        assert changes == [
            Change(tag=ChangeTag.EQUAL, text="a\n", old_index=0, new_index=0),
            Change(tag=ChangeTag.INSERT, text="b\n", old_index=None, new_index=1),
        ]

    def test_accepts_enum_and_marker_tags(self):
        changes = to_changes([(ChangeTag.DELETE, 0, None, "a\n"), ("+", None, 0, "b\n")])
        assert [c.tag for c in changes] == [ChangeTag.DELETE, ChangeTag.INSERT]

    def test_equal_without_old_index_is_rejected(self):
        with pytest.raises(InvalidChange):
            to_changes([("equal", None, 0, "a\n")])

    def test_unknown_tag_is_rejected(self):
        with pytest.raises(InvalidChange) as exc_info:
            to_changes([("replace", 0, 0, "a\n")])
        assert exc_info.value.reason == "unknown change tag"

    def test_diff_changes_shortcut(self):
        changes = diff_changes("a\n", "b\n")
        assert [(c.tag, c.old_index, c.new_index) for c in changes] == [
            (ChangeTag.DELETE, 0, None),
            (ChangeTag.INSERT, None, 0),
        ]
        assert not changes[1].consumes_original
