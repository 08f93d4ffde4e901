"""Tests for applying hunk selections."""

from hunk_patcher.editing.changes import Change, ChangeTag
from hunk_patcher.editing.hunks import Disposition, Hunk, accept, build_hunks, reject
from hunk_patcher.editing.patch_applier import apply


SAMPLE_FILE = """\
import os
import sys

def authenticate_user(username, password):
    user = db.find(username)
    return user.check_password(password)

def helper():
    return 42

def other():
    return 0
"""

UPDATED_FILE = """\
import os
import sys
import hashlib

def authenticate_user(username, password):
    user = db.find(username)
    return user.check_password(password)

def helper():
    return 42

def other():
    return 1
"""


class TestApply:
    def test_no_hunks_returns_original(self):
        assert apply(SAMPLE_FILE, []) == SAMPLE_FILE

    def test_no_hunks_keeps_missing_final_newline(self):
        assert apply("a\nb", []) == "a\nb"

    def test_undecided_hunks_are_skipped(self):
        hunks = build_hunks(SAMPLE_FILE, UPDATED_FILE, context=1)
        assert all(h.disposition is Disposition.UNDECIDED for h in hunks)
        assert apply(SAMPLE_FILE, hunks) == SAMPLE_FILE

    def test_accept_all(self):
        hunks = build_hunks(SAMPLE_FILE, UPDATED_FILE, context=1)
        assert len(hunks) == 2
        assert apply(SAMPLE_FILE, [accept(h) for h in hunks]) == UPDATED_FILE

    def test_accept_only_second(self):
        first, second = build_hunks(SAMPLE_FILE, UPDATED_FILE, context=1)
        reject(first)
        accept(second)
        result = apply(SAMPLE_FILE, [first, second])
        assert "import hashlib" not in result
        assert result == SAMPLE_FILE.replace("return 0", "return 1")

    def test_accept_only_first(self):
        first, second = build_hunks(SAMPLE_FILE, UPDATED_FILE, context=1)
        accept(first)
        result = apply(SAMPLE_FILE, [first, second])
        assert result == UPDATED_FILE.replace("return 1", "return 0")

    def test_walks_by_old_position(self):
        original = "a\nb\nc\nd\n"
        hunk = Hunk(
            changes=[
                Change(tag=ChangeTag.EQUAL, text="c\n", old_index=2),
                Change(tag=ChangeTag.DELETE, text="d\n", old_index=3),
                Change(tag=ChangeTag.INSERT, text="D\n"),
            ],
            disposition=Disposition.ACCEPT,
        )
        assert apply(original, [hunk]) == "a\nb\nc\nD\n"

    def test_does_not_modify_hunks(self):
        hunks = [accept(h) for h in build_hunks(SAMPLE_FILE, UPDATED_FILE, context=1)]
        before = [[c.text for c in h.changes] for h in hunks]
        apply(SAMPLE_FILE, hunks)
        assert [[c.text for c in h.changes] for h in hunks] == before

    def test_delete_everything(self):
        hunks = [accept(h) for h in build_hunks("a\nb\n", "")]
        assert apply("a\nb\n", hunks) == ""
