"""
External editor — lets the user hand-edit a hunk in their own editor.

The hunk is written to a temp file, the editor runs on it, and the result
is parsed and validated. Invalid edits are offered back for another round
instead of being thrown away.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import tempfile
from typing import Callable, Optional

from .editing.errors import InvalidDiffFormat, PatchMismatch
from .editing.hunk_editor import edit_hunk, render_hunk_text
from .editing.hunks import Hunk

logger = logging.getLogger(__name__)


class EditorError(RuntimeError):
    """Raised when the editor cannot be started or exits with an error."""


def launch_editor(text: str, editor: str) -> str:
    """Open *text* in *editor* and return what the user saved."""
    fd, tmp_path = tempfile.mkstemp(suffix=".diff", prefix="hunkpatch_")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)

        cmd = shlex.split(editor) + [tmp_path]
        logger.debug("Launching editor: %s", cmd)
        try:
            result = subprocess.run(cmd, check=False)
        except OSError as exc:
            raise EditorError(f"Could not start editor {editor!r}: {exc}") from exc
        if result.returncode != 0:
            raise EditorError(
                f"Editor {editor!r} exited with status {result.returncode}"
            )

        with open(tmp_path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    finally:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass


def edit_until_valid(
    hunk: Hunk,
    original: str,
    editor: str,
    ask_retry: Callable[[Exception], bool],
    launch: Callable[[str, str], str] = launch_editor,
    limit: Optional[int] = None,
) -> Optional[Hunk]:
    """Edit *hunk* until the result validates against *original*.

    After a failed edit, *ask_retry* is called with the error; when it
    returns True the editor is reopened on the user's last edit. *limit*
    is the first original line the edit may not touch.

    Returns
    -------
    Hunk | None
        The validated replacement hunk, or None if the user gave up.
    """
    text = render_hunk_text(hunk)
    while True:
        text = launch(text, editor)
        try:
            return edit_hunk(hunk, original, text, limit)
        except (InvalidDiffFormat, PatchMismatch) as exc:
            logger.warning("Edited hunk rejected: %s", exc)
            if not ask_retry(exc):
                return None
