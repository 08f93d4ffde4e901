"""Hunk engine — build, split, edit and apply line-level hunks."""

from .errors import HunkPatchError, InvalidChange, InvalidDiffFormat, PatchMismatch
from .changes import Change, ChangeTag, line_diff, to_changes, diff_changes, split_lines
from .hunks import (
    Hunk, Disposition, DEFAULT_CONTEXT,
    build_hunks, build_hunks_from_changes, accept, reject,
)
from .splitter import split_hunk, splice_hunks
from .hunk_editor import render_hunk_text, parse_hunk_text, check_patch, edit_hunk
from .patch_applier import apply

__all__ = [
    "HunkPatchError", "InvalidChange", "InvalidDiffFormat", "PatchMismatch",
    "Change", "ChangeTag", "line_diff", "to_changes", "diff_changes", "split_lines",
    "Hunk", "Disposition", "DEFAULT_CONTEXT",
    "build_hunks", "build_hunks_from_changes", "accept", "reject",
    "split_hunk", "splice_hunks",
    "render_hunk_text", "parse_hunk_text", "check_patch", "edit_hunk",
    "apply",
]
