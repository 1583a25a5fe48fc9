"""Opens HTML reports in a browser without blocking the dashboard."""
import logging
import shlex
import subprocess
import webbrowser
from pathlib import Path

from ..core.errors import HostSysmonError

logger = logging.getLogger(__name__)


class BrowserLauncher:
    """Launch the configured browser command, or the system default browser."""

    def __init__(self, command: str = ""):
        self.command = command

    def open(self, path: Path) -> None:
        if not self.command:
            if not webbrowser.open(path.resolve().as_uri()):
                raise HostSysmonError("No web browser available to open the report")
            return

        cmd = shlex.split(self.command) + [str(path)]
        logger.info("Opening %s", " ".join(cmd))
        try:
            subprocess.Popen(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            raise HostSysmonError(f"Could not start browser: {e}") from e
