"""Logging configuration for the persistent monitoring log."""
import logging
from pathlib import Path

from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(monitoring_log: Path, verbose: bool = False) -> logging.Logger:
    """Attach the monitoring log file (and optionally the console) to the package logger."""
    logger = logging.getLogger("hostsysmon")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    if not logger.handlers:
        monitoring_log.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(monitoring_log, encoding="utf-8")
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(fh)

        if verbose:
            logger.addHandler(RichHandler(show_path=False))
    return logger
