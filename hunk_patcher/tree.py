"""
Tree patcher — walks two directory trees and reviews every difference.

Files in both trees get a hunk review; files only in the left tree are
offered for deletion, files only in the right tree for addition. The
right tree is modified in place.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Callable, Optional

from .config import Config
from .editing.errors import InvalidChange
from .external_editor import launch_editor
from .session import PatchSession, read_choice

logger = logging.getLogger(__name__)


@dataclass
class TreeReport:
    """What happened to each file during a tree review."""
    patched: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    restored: list[str] = field(default_factory=list)
    added: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def collect_files(root: str) -> dict[str, str]:
    """Map relative path → absolute path for every regular file under *root*.

    Symlinks are neither followed nor reported.
    """
    files: dict[str, str] = {}
    root = os.path.abspath(root)
    for dirpath, _dirnames, filenames in os.walk(root, followlinks=False):
        for name in filenames:
            abs_path = os.path.join(dirpath, name)
            if os.path.islink(abs_path) or not os.path.isfile(abs_path):
                continue
            files[os.path.relpath(abs_path, root)] = abs_path
    return files


def read_text(path: str, encoding: str = "utf-8") -> str | None:
    """Read *path* keeping line endings; None for undecodable (binary) files."""
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            return f.read()
    except UnicodeDecodeError:
        logger.warning("Skipping %s: not valid %s text", path, encoding)
        return None


def write_text(path: str, content: str, encoding: str = "utf-8") -> None:
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(content)


class TreePatcher:
    """Review the differences between a *left* (original) and *right* tree."""

    def __init__(
        self,
        left: str,
        right: str,
        config: Config | None = None,
        prompt: Optional[Callable[[str], str]] = None,
        editor: Optional[Callable[[str, str], str]] = None,
        out: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.left = left
        self.right = right
        self.config = config or Config()
        self._prompt = prompt or input
        self._editor = editor or launch_editor
        self._out = out or print
        self.report = TreeReport()

    def run(self) -> TreeReport:
        left_files = collect_files(self.left)
        right_files = collect_files(self.right)

        # Files present in both → review hunks
        for rel_path in sorted(left_files.keys() & right_files.keys()):
            self._patch_common(rel_path, left_files[rel_path], right_files[rel_path])

        # Files only in left → delete
        for rel_path in sorted(left_files.keys() - right_files.keys()):
            self._review_deletion(rel_path, left_files[rel_path])

        # Files only in right → add
        for rel_path in sorted(right_files.keys() - left_files.keys()):
            self._review_addition(rel_path, right_files[rel_path])

        logger.info(
            "Tree review done: %d patched, %d deleted, %d restored, "
            "%d added, %d removed, %d skipped",
            len(self.report.patched), len(self.report.deleted),
            len(self.report.restored), len(self.report.added),
            len(self.report.removed), len(self.report.skipped),
        )
        return self.report

    # ------------------------------------------------------------------
    # Per-file handling
    # ------------------------------------------------------------------

    def _session_result(self, path: str, original: str, candidate: str) -> str | None:
        """Review one file; None if its diff could not be turned into hunks."""
        try:
            session = PatchSession(
                path, original, candidate, config=self.config,
                prompt=self._prompt, editor=self._editor, out=self._out,
            )
            return session.run()
        except InvalidChange as e:
            logger.error("Aborting %s: %s", path, e)
            self._out(f"Skipping {path}: {e}")
            return None

    def _patch_common(self, rel_path: str, left_file: str, right_file: str) -> None:
        encoding = self.config.ENCODING
        original = read_text(left_file, encoding)
        dest = read_text(right_file, encoding)
        if original is None or dest is None:
            self.report.skipped.append(rel_path)
            return
        if original == dest:
            return

        result = self._session_result(right_file, original, dest)
        if result is None:
            self.report.skipped.append(rel_path)
            return
        if result != dest:
            write_text(right_file, result, encoding)
        self.report.patched.append(rel_path)

    def _review_deletion(self, rel_path: str, left_file: str) -> None:
        encoding = self.config.ENCODING
        original = read_text(left_file, encoding)
        if original is None:
            self.report.skipped.append(rel_path)
            return

        self._out(f"\n@@ delete {left_file}")
        choice = read_choice(self._prompt, "@@:> ")
        target = os.path.join(self.right, rel_path)

        if choice in ("y", ""):
            self.report.deleted.append(rel_path)
        elif choice == "n":
            write_text(target, original, encoding)
            self.report.restored.append(rel_path)
        elif choice == "e":
            result = self._session_result(left_file, original, "")
            if result is None:
                self.report.skipped.append(rel_path)
            elif result:
                write_text(target, result, encoding)
                self.report.restored.append(rel_path)
            else:
                self.report.deleted.append(rel_path)
        elif choice == "q":
            self.report.skipped.append(rel_path)
        else:
            self._out("Unknown command")
            self.report.skipped.append(rel_path)

    def _review_addition(self, rel_path: str, right_file: str) -> None:
        encoding = self.config.ENCODING
        dest = read_text(right_file, encoding)
        if dest is None:
            self.report.skipped.append(rel_path)
            return

        self._out(f"\n@@ add {right_file}")
        choice = read_choice(self._prompt, "@@:> ")

        if choice in ("y", ""):
            self.report.added.append(rel_path)
        elif choice == "n":
            os.remove(right_file)
            self.report.removed.append(rel_path)
        elif choice == "e":
            result = self._session_result(right_file, "", dest)
            if result is None:
                self.report.skipped.append(rel_path)
                return
            write_text(right_file, result, encoding)
            self.report.added.append(rel_path)
        elif choice == "q":
            self.report.skipped.append(rel_path)
        else:
            self._out("Unknown command")
            self.report.skipped.append(rel_path)


def patch_dirs(left: str, right: str, config: Config | None = None, **kwargs) -> TreeReport:
    """Review the differences between two trees, updating *right* in place."""
    return TreePatcher(left, right, config=config, **kwargs).run()
