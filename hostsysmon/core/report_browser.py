"""Browsing of previously generated reports."""
import logging
from pathlib import Path
from typing import Optional

from .errors import HostSysmonError

logger = logging.getLogger(__name__)

NO_REPORTS = "No monitoring reports found. Please run the monitoring script first."
NO_SELECTION = "No selection made."
NO_REPORT_SELECTED = "No report selected."
INVALID_SELECTION = "Invalid selection. Please select a valid file or folder."
INVALID_FILE = "The selected file does not exist or is not a valid file."


class ReportBrowser:
    """Lets the user pick a report file under the log root and displays it."""

    def __init__(self, log_dir: Path, dialogs, launcher):
        self.log_dir = Path(log_dir)
        self.dialogs = dialogs
        self.launcher = launcher

    def browse(self) -> Optional[Path]:
        """Return the file that was displayed, or None if browsing was aborted."""
        if not self._has_reports():
            self.dialogs.error(NO_REPORTS)
            return None

        selection = self.dialogs.select_path("Select a report or folder to view", self.log_dir)
        if selection is None:
            self.dialogs.info(NO_SELECTION)
            return None

        if selection.is_dir():
            report = self.dialogs.select_path("Select a report to view", selection)
        elif selection.is_file():
            report = selection
        else:
            self.dialogs.error(INVALID_SELECTION)
            return None

        if report is None:
            self.dialogs.info(NO_REPORT_SELECTED)
            return None

        if not report.is_file():
            self.dialogs.error(INVALID_FILE)
            return None

        self._display(report)
        return report

    def _has_reports(self) -> bool:
        """Reports are the timestamped directories under the log root."""
        if not self.log_dir.is_dir():
            return False
        return any(entry.is_dir() for entry in self.log_dir.iterdir())

    def _display(self, report: Path) -> None:
        if report.name.endswith(".html"):
            try:
                self.launcher.open(report)
            except HostSysmonError as e:
                logger.error("Browser launch failed: %s", e)
                self.dialogs.error(str(e))
        else:
            self.dialogs.show_text(report, title="Report Viewer")
