"""
Diff display — render hunks for review.

Includes a Textual-based hunk viewer that pauses the review loop so the
user can pick an action for the hunk on screen.
"""

from __future__ import annotations

from .editing.changes import ChangeTag, strip_terminator
from .editing.hunk_editor import hunk_header
from .editing.hunks import Hunk

_GREEN = "\033[32m"
_RED = "\033[31m"
_CYAN = "\033[36m"
_BOLD = "\033[1m"
_RESET = "\033[0m"

# Review commands and their labels, in prompt order
CHOICES = {
    "y": "accept",
    "n": "reject",
    "e": "edit",
    "s": "split",
    "q": "quit",
}


def format_hunk(hunk: Hunk, path: str | None = None, color: bool = True) -> str:
    """Render *hunk* as text, with ANSI colors when *color* is set.

    Green for insertions (+), red for deletions (-), cyan for @@ headers.
    """
    lines: list[str] = []
    if path:
        header = f"@@ {path}"
        lines.append(f"{_BOLD}{header}{_RESET}" if color else header)
    header = hunk_header(hunk)
    lines.append(f"{_CYAN}{header}{_RESET}" if color else header)

    for change in hunk.changes:
        body = strip_terminator(change.text)
        if change.tag is ChangeTag.INSERT and color:
            lines.append(f"{_GREEN}+{body}{_RESET}")
        elif change.tag is ChangeTag.DELETE and color:
            lines.append(f"{_RED}-{body}{_RESET}")
        else:
            lines.append(f"{change.tag.marker}{body}")
    return "\n".join(lines)


def _format_rich_hunk(hunk: Hunk) -> str:
    """Convert a hunk to Rich markup for Textual display."""
    markup_lines: list[str] = [f"[cyan]{hunk_header(hunk)}[/cyan]"]
    for change in hunk.changes:
        # Escape Rich markup characters in the line content
        escaped = strip_terminator(change.text).replace("[", "\\[")
        if change.tag is ChangeTag.INSERT:
            markup_lines.append(f"[green]+{escaped}[/green]")
        elif change.tag is ChangeTag.DELETE:
            markup_lines.append(f"[red]-{escaped}[/red]")
        else:
            markup_lines.append(f" {escaped}")
    return "\n".join(markup_lines)


# ══════════════════════════════════════════════════════════════════
#  Interactive Hunk Review — Textual TUI
# ══════════════════════════════════════════════════════════════════

def textual_hunk_choice(hunk: Hunk, path: str, position: int, total: int) -> str:
    """Show *hunk* in a Textual app and return the chosen command key.

    Returns one of the keys of :data:`CHOICES`; closing the app with Esc
    counts as ``"q"``.
    """
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import Horizontal, VerticalScroll
    from textual.widgets import Button, Footer, Static

    class HunkReviewApp(App):
        """Hunk viewer with accept / reject / edit / split / quit."""

        CSS = """
        Screen {
            background: $surface;
        }
        #title-bar {
            dock: top;
            height: 3;
            background: #1a1a2e;
            color: #e94560;
            text-align: center;
            padding: 1;
            text-style: bold;
        }
        #hunk-scroll {
            height: 1fr;
            margin: 1 2;
            border: round #444;
            padding: 1;
        }
        #action-buttons {
            dock: bottom;
            height: 3;
            align: center middle;
            padding: 0 2;
        }
        #action-buttons Button {
            margin: 0 1;
            min-width: 12;
        }
        """

        BINDINGS = [
            Binding("y", "choose('y')", "Accept"),
            Binding("enter", "choose('y')", "Accept", show=False),
            Binding("n", "choose('n')", "Reject"),
            Binding("e", "choose('e')", "Edit"),
            Binding("s", "choose('s')", "Split"),
            Binding("q", "choose('q')", "Quit"),
            Binding("escape", "choose('q')", "Quit", show=False),
        ]

        def __init__(self) -> None:
            super().__init__()
            self.choice: str = "q"

        def compose(self) -> ComposeResult:
            yield Static(
                f" ━━  {path} — hunk {position}/{total}  ━━ ",
                id="title-bar",
            )
            with VerticalScroll(id="hunk-scroll"):
                yield Static(_format_rich_hunk(hunk))
            with Horizontal(id="action-buttons"):
                for key, label in CHOICES.items():
                    variant = {"y": "success", "n": "error"}.get(key, "default")
                    yield Button(f"{label} ({key})", id=f"choice-{key}",
                                 variant=variant)
            yield Footer()

        def on_button_pressed(self, event: Button.Pressed) -> None:
            button_id = event.button.id or ""
            if button_id.startswith("choice-"):
                self.action_choose(button_id[len("choice-"):])

        def action_choose(self, key: str) -> None:
            self.choice = key
            self.exit()

    app = HunkReviewApp()
    app.run()
    return app.choice
