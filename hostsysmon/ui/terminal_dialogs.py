"""Terminal dialogs built on Rich, with a Textual text viewer."""
from pathlib import Path
from typing import List, Optional, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from .dialogs import Dialogs
from .report_viewer import ReportViewer


class TerminalDialogs(Dialogs):
    """Console rendition of the dashboard dialogs."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def alert(self, message: str) -> None:
        self.console.print(Panel(message, title="Alert", border_style="red"))
        self._ask("Press Enter to continue")

    def info(self, message: str) -> None:
        self.console.print(Panel(message, title="Info", border_style="blue"))

    def error(self, message: str) -> None:
        self.console.print(Panel(message, title="Error", border_style="red"))

    def choose(self, title: str, options: List[Tuple[str, str]]) -> Optional[str]:
        table = Table(title=title)
        table.add_column("Option", justify="center")
        table.add_column("Description")
        for key, description in options:
            table.add_row(key, description)
        self.console.print(table)

        return self._ask("Select an option")

    def select_path(self, title: str, start: Path) -> Optional[Path]:
        """List the entries of `start`; accept an entry number or a path."""
        entries = sorted(start.iterdir()) if start.is_dir() else []

        table = Table(title=f"{title} ({start})")
        table.add_column("#", justify="right")
        table.add_column("Name")
        for index, entry in enumerate(entries, start=1):
            name = f"{entry.name}/" if entry.is_dir() else entry.name
            table.add_row(str(index), name)
        self.console.print(table)

        answer = self._ask("Enter a number or path (empty to cancel)")
        if answer is None:
            return None
        if answer.isdigit() and 1 <= int(answer) <= len(entries):
            return entries[int(answer) - 1]

        path = Path(answer).expanduser()
        return path if path.is_absolute() else start / path

    def show_text(self, path: Path, title: str) -> None:
        ReportViewer(path, title=title).run()

    def _ask(self, prompt: str) -> Optional[str]:
        """Prompt for a line of input; empty input or EOF means cancelled."""
        try:
            answer = Prompt.ask(prompt, console=self.console, default="", show_default=False)
        except EOFError:
            return None
        answer = answer.strip()
        return answer or None
