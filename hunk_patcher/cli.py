"""
CLI entry point — argument parsing and main execution flow.
"""

import argparse
import os
import sys

from .cli_display import log, print_error, setup_logger
from .config import Config
from .editing.errors import InvalidChange
from .session import patch_text
from .tree import patch_dirs, read_text, write_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hunkpatch",
        description="Review the differences between two files or trees hunk by hunk. "
                    "The right-hand side is rewritten with the accepted changes.",
    )
    parser.add_argument("left", help="Original file or directory")
    parser.add_argument("right", help="Candidate file or directory (updated in place)")
    parser.add_argument("--context", type=int, default=None,
                        help="Unchanged lines shown around each change (default: from config)")
    parser.add_argument("--editor", default=None,
                        help="Editor command used for hand-editing hunks")
    parser.add_argument("--config", default=None,
                        help="Path to .hunkpatch.yaml config file")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable colored hunk output")
    parser.add_argument("--tui", action="store_true",
                        help="Review hunks in the Textual viewer")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # ── 0. Load config ──
    try:
        cfg = Config.load(args.config)
    except ValueError as e:
        print_error(f"Invalid configuration: {e}")
        return 1

    # CLI overrides
    if args.context is not None:
        if args.context < 0:
            parser.error("--context must be non-negative")
        cfg.CONTEXT = args.context
    if args.editor:
        cfg.EDITOR = args.editor
    if args.no_color:
        cfg.COLOR = False
    if args.tui:
        cfg.UI = "textual"

    setup_logger(cfg.LOG_DIR)
    log.info(f"hunkpatch {args.left} -> {args.right} (context={cfg.CONTEXT})")

    try:
        if os.path.isdir(args.left) and os.path.isdir(args.right):
            report = patch_dirs(args.left, args.right, config=cfg)
            print(f"\n  {len(report.patched)} patched, {len(report.deleted)} deleted, "
                  f"{len(report.restored)} restored, {len(report.added)} added, "
                  f"{len(report.removed)} removed, {len(report.skipped)} skipped")
        elif os.path.isfile(args.left) and os.path.isfile(args.right):
            original = read_text(args.left, cfg.ENCODING)
            candidate = read_text(args.right, cfg.ENCODING)
            if original is None or candidate is None:
                print_error("Binary files are not supported.")
                return 1
            result = patch_text(args.right, original, candidate, config=cfg)
            if result != candidate:
                write_text(args.right, result, cfg.ENCODING)
        else:
            print_error(f"{args.left} and {args.right} must both be files "
                        f"or both be directories.")
            return 1
    except InvalidChange as e:
        log.error(str(e))
        print_error(str(e))
        return 1
    except OSError as e:
        log.error(f"I/O error: {e}")
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        print()
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
