"""
Patch session — the review loop for one file.

Each hunk is shown and the user picks an action:

    y / Enter  accept       n  reject
    e          edit         s  split
    q          quit (remaining hunks are left out)
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Callable, Optional

from .config import Config
from .diff_display import CHOICES, format_hunk, textual_hunk_choice
from .editing.hunks import Disposition, Hunk, accept, build_hunks, reject
from .editing.patch_applier import apply
from .editing.splitter import splice_hunks, split_hunk
from .external_editor import EditorError, edit_until_valid, launch_editor

logger = logging.getLogger(__name__)

PROMPT = "\n@@:> "

HELP_TEXT = "\n".join(
    [f"  {key}  {label}" for key, label in CHOICES.items()]
    + ["  ?  help"]
)


def read_choice(prompt: Callable[[str], str], text: str = PROMPT) -> str:
    """Read one command; end of input counts as quit."""
    try:
        return prompt(text).strip().lower()
    except EOFError:
        return "q"


class PatchSession:
    """Interactive review of the hunks between two versions of a file."""

    def __init__(
        self,
        path: str,
        original: str,
        candidate: str,
        config: Config | None = None,
        prompt: Optional[Callable[[str], str]] = None,
        editor: Optional[Callable[[str, str], str]] = None,
        out: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.path = path
        self.original = original
        self.candidate = candidate
        self.config = config or Config()
        self._prompt = prompt or input
        self._editor = editor or launch_editor
        self._out = out or print
        self.hunks: list[Hunk] = build_hunks(original, candidate,
                                             self.config.CONTEXT)
        self.quit = False
        self._use_textual = self.config.UI == "textual"

    # ------------------------------------------------------------------
    # Review loop
    # ------------------------------------------------------------------

    def run(self) -> str:
        """Review every hunk and return the patched text."""
        i = 0
        while i < len(self.hunks):
            choice = self._choose(i)
            hunk = self.hunks[i]

            if choice in ("y", ""):
                accept(hunk)
                logger.debug("%s: accepted hunk at line %d", self.path, hunk.anchor + 1)
                i += 1
            elif choice == "n":
                reject(hunk)
                logger.debug("%s: rejected hunk at line %d", self.path, hunk.anchor + 1)
                i += 1
            elif choice == "e":
                self._edit(i)
            elif choice == "s":
                self._split(i)
            elif choice == "q":
                self.quit = True
                break
            elif choice == "?":
                self._out(HELP_TEXT)
            else:
                self._out("Unknown command")

        logger.info("%s: %s", self.path, self._format_summary())
        return self.result()

    def result(self) -> str:
        """Text with the accepted hunks applied."""
        return apply(self.original, self.hunks)

    def summary(self) -> dict[str, int]:
        """Count hunks per disposition."""
        counts = Counter(h.disposition.value for h in self.hunks)
        return {d.value: counts.get(d.value, 0) for d in Disposition}

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _choose(self, index: int) -> str:
        hunk = self.hunks[index]
        if self._use_textual:
            try:
                return textual_hunk_choice(hunk, self.path, index + 1,
                                           len(self.hunks))
            except Exception as e:
                logger.warning("Textual hunk viewer failed: %s", e)
                self._use_textual = False

        self._out(format_hunk(hunk, self.path, color=self.config.COLOR))
        return read_choice(self._prompt)

    def _edit(self, index: int) -> None:
        limit = self._next_anchor(index)
        try:
            edited = edit_until_valid(
                self.hunks[index], self.original, self.config.EDITOR,
                self._ask_retry, launch=self._editor, limit=limit,
            )
        except EditorError as e:
            logger.warning("%s: %s", self.path, e)
            self._out(f"Editor failed: {e}")
            return
        if edited is not None:
            self.hunks = splice_hunks(self.hunks, index, [edited])

    def _next_anchor(self, index: int) -> Optional[int]:
        """First original line owned by the hunk after *index*, if any."""
        if index + 1 < len(self.hunks):
            return self.hunks[index + 1].anchor
        return None

    def _split(self, index: int) -> None:
        pieces = split_hunk(self.hunks[index])
        if len(pieces) > 1:
            self.hunks = splice_hunks(self.hunks, index, pieces)
        else:
            self._out("Hunk cannot be split further.")

    def _ask_retry(self, error: Exception) -> bool:
        self._out(f"\nPatch does not apply:\n{error}")
        answer = read_choice(self._prompt,
                             "Press Enter to re-edit, q to discard the edit… ")
        return answer != "q"

    def _format_summary(self) -> str:
        counts = self.summary()
        parts = [f"{count} {name}" for name, count in counts.items() if count]
        return ", ".join(parts) or "no hunks"


def patch_text(
    path: str,
    original: str,
    candidate: str,
    config: Optional[Config] = None,
    **kwargs,
) -> str:
    """Run a review session for one file and return the patched text."""
    return PatchSession(path, original, candidate, config=config, **kwargs).run()
