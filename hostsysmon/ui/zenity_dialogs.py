"""GUI dialogs through the zenity command."""
import html
import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Tuple

from ..collectors.base import tool_available
from ..core.errors import ToolNotFoundError
from .dialogs import Dialogs

logger = logging.getLogger(__name__)


class ZenityDialogs(Dialogs):
    """Modal GTK dialogs; every call blocks until the dialog closes."""

    def __init__(self, command: str = "zenity"):
        if not tool_available(command):
            raise ToolNotFoundError(command)
        self.command = command

    def alert(self, message: str) -> None:
        self._run("--error", f"--text={html.escape(message)}")

    def info(self, message: str) -> None:
        self._run("--info", f"--text={html.escape(message)}")

    def error(self, message: str) -> None:
        self._run("--error", f"--text={html.escape(message)}")

    def choose(self, title: str, options: List[Tuple[str, str]]) -> Optional[str]:
        args = ["--list", f"--title={title}", "--column=Option", "--column=Description"]
        for key, description in options:
            args.extend([key, description])
        args.extend(["--height=400", "--width=400"])
        return self._run(*args)

    def select_path(self, title: str, start: Path) -> Optional[Path]:
        # Trailing slash opens the dialog inside the directory
        selection = self._run("--file-selection", f"--title={title}", f"--filename={start}/")
        return Path(selection) if selection else None

    def show_text(self, path: Path, title: str) -> None:
        self._run("--text-info", f"--filename={path}", f"--title={title}")

    def _run(self, *args: str) -> Optional[str]:
        """Run zenity and return its stripped output, None when cancelled or empty."""
        result = subprocess.run([self.command, *args], capture_output=True, text=True)
        if result.returncode != 0:
            logger.debug("zenity %s exited with %d", args[0], result.returncode)
            return None
        return result.stdout.strip() or None
