"""Tests for the hunk splitter."""

import pytest

from hunk_patcher.editing.changes import ChangeTag
from hunk_patcher.editing.hunk_editor import edit_hunk, render_hunk_text
from hunk_patcher.editing.hunks import Disposition, accept, build_hunks
from hunk_patcher.editing.patch_applier import apply
from hunk_patcher.editing.splitter import splice_hunks, split_hunk


ORIGINAL = "".join(f"{n}\n" for n in range(1, 11))
# lines 3 and 6 changed, two equal lines apart
CANDIDATE = ORIGINAL.replace("3\n", "THREE\n").replace("6\n", "SIX\n")


@pytest.fixture
def two_region_hunk():
    hunks = build_hunks(ORIGINAL, CANDIDATE, context=3)
    assert len(hunks) == 1
    return hunks[0]


class TestSplitHunk:
    def test_splits_at_equal_lines(self, two_region_hunk):
        pieces = split_hunk(two_region_hunk)

        assert len(pieces) == 2
        assert [c.text for c in pieces[0].changes] == [
            "1\n", "2\n", "3\n", "THREE\n", "4\n",
        ]
        # trailing context stays with the last piece
        assert [c.text for c in pieces[1].changes] == [
            "5\n", "6\n", "SIX\n", "7\n", "8\n", "9\n",
        ]
        assert pieces[0].anchor == 0
        assert pieces[1].anchor == 4
        assert all(p.disposition is Disposition.UNDECIDED for p in pieces)

    def test_split_preserves_total_content(self, two_region_hunk):
        unsplit = apply(ORIGINAL, [accept(two_region_hunk)])
        pieces = [accept(p) for p in split_hunk(two_region_hunk)]
        assert apply(ORIGINAL, pieces) == unsplit == CANDIDATE

    def test_pieces_can_be_decided_separately(self, two_region_hunk):
        first, second = split_hunk(two_region_hunk)
        accept(second)
        assert apply(ORIGINAL, [first, second]) == ORIGINAL.replace("6\n", "SIX\n")

    def test_single_region_returns_one_piece(self):
        hunk = build_hunks(ORIGINAL, ORIGINAL.replace("5\n", "FIVE\n"), context=2)[0]
        pieces = split_hunk(hunk)
        assert len(pieces) == 1
        assert [c.text for c in pieces[0].changes] == [c.text for c in hunk.changes]

    def test_pieces_own_their_changes(self, two_region_hunk):
        pieces = split_hunk(two_region_hunk)
        pieces[0].changes[0].text = "changed\n"
        assert two_region_hunk.changes[0].text == "1\n"

    def test_edited_hunk_can_be_split_again(self, two_region_hunk):
        text = render_hunk_text(two_region_hunk).replace("+SIX\n", "+six\n")
        edited = edit_hunk(two_region_hunk, ORIGINAL, text)

        pieces = split_hunk(edited)
        assert len(pieces) == 2
        assert pieces[1].anchor == 4
        accept(pieces[1])
        assert apply(ORIGINAL, pieces) == ORIGINAL.replace("6\n", "six\n")

    def test_pure_insertion_pieces_keep_position(self):
        original = "a\nb\n"
        candidate = "a\nX\nb\nY\n"
        hunk = build_hunks(original, candidate, context=2)[0]
        pieces = split_hunk(hunk)

        assert len(pieces) == 2
        assert pieces[0].changes[0].tag is ChangeTag.EQUAL
        assert [c.text for c in pieces[1].changes] == ["Y\n"]
        assert pieces[1].anchor == 2
        accept(pieces[1])
        assert apply(original, pieces) == "a\nb\nY\n"


class TestSpliceHunks:
    def test_replaces_one_entry_without_mutating(self):
        hunks = build_hunks(ORIGINAL, CANDIDATE, context=3)
        pieces = split_hunk(hunks[0])

        spliced = splice_hunks(hunks, 0, pieces)
        assert spliced == pieces
        assert len(hunks) == 1

    def test_index_out_of_range(self):
        with pytest.raises(IndexError):
            splice_hunks([], 0, [])
