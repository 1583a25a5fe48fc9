"""Textual viewer for plain-text and Markdown reports."""
from pathlib import Path

from textual.app import App
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Static


class ReportViewer(App):
    """Full-screen scrollable view of one report file."""

    CSS = """
    #viewer_title {
        text-align: center;
        text-style: bold;
        color: $primary;
    }

    #viewer_body {
        border: thick $primary;
        height: 1fr;
        padding: 0 1;
    }

    #viewer_footer {
        text-align: center;
        color: $text-muted;
        text-style: italic;
    }
    """

    BINDINGS = [
        ("q", "quit", "Close"),
        ("escape", "quit", "Close"),
    ]

    def __init__(self, path: Path, title: str = "Report Viewer"):
        super().__init__()
        self.path = path
        self.viewer_title = title

    def compose(self):
        with Vertical():
            yield Static(f"{self.viewer_title} - {self.path.name}", id="viewer_title", markup=False)
            with VerticalScroll(id="viewer_body"):
                yield Static(self._read_report(), id="viewer_content", markup=False)
            yield Static("Press q or Esc to close", id="viewer_footer")

    def _read_report(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            return f"Could not read {self.path}: {e}"
