"""Display configuration data structure."""
from dataclasses import dataclass

BACKENDS = ("terminal", "zenity")


@dataclass(frozen=True)
class DisplayConfig:
    """User interface preferences."""
    backend: str = "terminal"
    browser_command: str = ""
    html_renderer: str = "pandoc"

    def __post_init__(self):
        """Validate the dialog backend."""
        if self.backend not in BACKENDS:
            raise ValueError(f"Unknown display backend: {self.backend}")
