"""Tests for hunk rendering."""

from hunk_patcher.diff_display import _format_rich_hunk, format_hunk
from hunk_patcher.editing.hunks import build_hunks


ORIGINAL = "".join(f"{n}\n" for n in range(1, 11))
CANDIDATE = ORIGINAL.replace("5\n", "FIVE\n")


def _hunk():
    return build_hunks(ORIGINAL, CANDIDATE, context=1)[0]


class TestFormatHunk:
    def test_plain_output(self):
        assert format_hunk(_hunk(), "nums.txt", color=False) == (
            "@@ nums.txt\n"
            "@@ 3,3\n"
            " 4\n"
            "-5\n"
            "+FIVE\n"
            " 6"
        )

    def test_without_path(self):
        assert format_hunk(_hunk(), color=False).startswith("@@ 3,3\n")

    def test_colored_output(self):
        text = format_hunk(_hunk(), "nums.txt")
        assert "\033[32m+FIVE\033[0m" in text
        assert "\033[31m-5\033[0m" in text
        assert "\033[36m@@ 3,3\033[0m" in text

    def test_missing_newline_is_displayed_as_a_line(self):
        hunk = build_hunks("a\nb", "a\nc", context=0)[0]
        assert format_hunk(hunk, color=False).splitlines()[1:] == ["-b", "+c"]


class TestRichMarkup:
    def test_brackets_are_escaped(self):
        hunk = build_hunks("x = [1]\n", "x = [2]\n")[0]
        markup = _format_rich_hunk(hunk)
        assert "[red]-x = \\[1][/red]" in markup
        assert "[green]+x = \\[2][/green]" in markup
