"""
Hunk editor — renders a hunk as marked-up text for hand editing, parses
the edited text back and re-validates it against the original.

Text format: one line per change, prefixed with ``' '`` (context),
``'+'`` (insert) or ``'-'`` (delete). Lines starting with ``@@`` are
headers and are ignored. A ``\\`` line (``\\ No newline at end of file``)
marks the preceding line as having no terminator.
"""

from __future__ import annotations

import logging

from .changes import Change, ChangeTag, split_lines, strip_terminator
from .errors import InvalidDiffFormat, PatchMismatch
from .hunks import Hunk

logger = logging.getLogger(__name__)

NO_NEWLINE_MARKER = "\\ No newline at end of file"

_MARKERS = {tag.marker: tag for tag in ChangeTag}


def hunk_header(hunk: Hunk) -> str:
    """Return the ``@@ old,new`` header line (without terminator)."""
    new_start = hunk.new_start
    if new_start is None:
        return f"@@ {hunk.anchor}"
    return f"@@ {hunk.anchor},{new_start}"


def render_hunk_text(hunk: Hunk) -> str:
    """Render *hunk* in the editable marked-up format."""
    out = [hunk_header(hunk) + "\n"]
    for change in hunk.changes:
        if change.text.endswith("\n"):
            out.append(change.tag.marker + change.text)
        else:
            out.append(change.tag.marker + change.text + "\n")
            out.append(NO_NEWLINE_MARKER + "\n")
    return "".join(out)


def parse_hunk_text(text: str, anchor: int) -> list[Change]:
    """Parse edited hunk text into changes.

    Every change gets ``old_index = anchor``; :func:`check_patch`
    replaces these with real positions once the text is validated.

    Raises
    ------
    InvalidDiffFormat
        On a line with no recognised marker, a stray ``\\`` line, or
        when the text holds no change lines at all.
    """
    changes: list[Change] = []

    for number, line in enumerate(split_lines(text), start=1):
        if line.startswith("@@"):
            continue
        if line.startswith("\\"):
            if not changes:
                raise InvalidDiffFormat(number, line, reason="no line to attach to")
            last = changes[-1]
            if last.text.endswith("\n"):
                last.text = last.text[:-1]
            continue

        tag = _MARKERS.get(line[:1])
        if tag is None:
            raise InvalidDiffFormat(number, line)

        body = line[1:]
        if not body.endswith("\n"):
            body += "\n"
        changes.append(Change(tag=tag, text=body, old_index=anchor))

    if not changes:
        raise InvalidDiffFormat(0, "", reason="hunk has no lines")
    return changes


def check_patch(original: str, anchor: int, text: str,
                limit: int | None = None) -> Hunk:
    """Parse *text* and validate it against *original* starting at *anchor*.

    Context and delete lines must match the original line at the cursor
    (terminators ignored). They advance the cursor; inserts do not.
    When *limit* is given, the hunk may not consume original lines at or
    past that index; they belong to the next hunk.

    Returns
    -------
    Hunk
        An undecided hunk whose context and delete lines carry their
        real original positions and the original's exact line text.

    Raises
    ------
    InvalidDiffFormat
        If the text cannot be parsed.
    PatchMismatch
        If a context or delete line does not match the original, or
        reaches past *limit*.
    """
    changes = parse_hunk_text(text, anchor)
    original_lines = split_lines(original)
    cursor = anchor

    for change in changes:
        if change.tag is ChangeTag.INSERT:
            change.old_index = None
            continue

        actual = strip_terminator(change.text)
        if limit is not None and cursor >= limit:
            logger.warning("Edited hunk reaches into the next hunk at line %d",
                           cursor + 1)
            raise PatchMismatch(cursor + 1, None, actual,
                                reason="line belongs to the next hunk")
        if cursor >= len(original_lines):
            logger.warning("Edited hunk runs past end of file at line %d", cursor + 1)
            raise PatchMismatch(cursor + 1, None, actual)

        expected = strip_terminator(original_lines[cursor])
        if expected != actual:
            logger.warning(
                "Edited hunk does not apply at line %d: %r != %r",
                cursor + 1, expected, actual,
            )
            raise PatchMismatch(cursor + 1, expected, actual)

        change.old_index = cursor
        change.text = original_lines[cursor]
        cursor += 1

    return Hunk(changes=changes, start=anchor)


def edit_hunk(hunk: Hunk, original: str, text: str,
              limit: int | None = None) -> Hunk:
    """Replace *hunk* with the edited *text*, validated at the hunk's anchor."""
    return check_patch(original, hunk.anchor, text, limit)
