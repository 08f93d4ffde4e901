"""
hunk_patcher — interactive, hunk-based text patching.

Public API for library usage::

    from hunk_patcher import build_hunks, accept, apply

    hunks = build_hunks(original, candidate, context=6)
    for hunk in hunks:
        accept(hunk)
    assert apply(original, hunks) == candidate
"""

from .editing import (
    Change, ChangeTag, Hunk, Disposition,
    HunkPatchError, InvalidChange, InvalidDiffFormat, PatchMismatch,
    build_hunks, accept, reject, split_hunk, edit_hunk, apply,
)
from .session import PatchSession, patch_text
from .tree import TreeReport, patch_dirs

__all__ = [
    "Change", "ChangeTag", "Hunk", "Disposition",
    "HunkPatchError", "InvalidChange", "InvalidDiffFormat", "PatchMismatch",
    "build_hunks", "accept", "reject", "split_hunk", "edit_hunk", "apply",
    "PatchSession", "patch_text", "TreeReport", "patch_dirs",
]
