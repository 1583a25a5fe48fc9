"""User-facing dialog interface shared by the UI backends."""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Tuple


class Dialogs(ABC):
    """Blocking dialogs used by the dashboard, generator and browser."""

    @abstractmethod
    def alert(self, message: str) -> None:
        """Show a threshold alert and wait for acknowledgement."""

    @abstractmethod
    def info(self, message: str) -> None:
        ...

    @abstractmethod
    def error(self, message: str) -> None:
        ...

    @abstractmethod
    def choose(self, title: str, options: List[Tuple[str, str]]) -> Optional[str]:
        """Single-select list of (key, description); None when cancelled."""

    @abstractmethod
    def select_path(self, title: str, start: Path) -> Optional[Path]:
        """File or directory selection starting at `start`; None when cancelled."""

    @abstractmethod
    def show_text(self, path: Path, title: str) -> None:
        """Display a text file until the user closes it."""
