"""On-disk layout of a monitoring report."""
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional

TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


@dataclass(frozen=True)
class Report:
    """One timestamped bundle of metric logs and its aggregated summary."""
    timestamp: str
    directory: Path
    log_files: List[Path]
    markdown_path: Path
    html_path: Optional[Path] = None


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


def log_file_name(category: str, timestamp: str) -> str:
    return f"{category}_{timestamp}.log"


def markdown_file_name(timestamp: str) -> str:
    return f"report_{timestamp}.md"


def section_name(log_name: str, timestamp: str) -> str:
    """Recover the category from a log file name by dropping the _<timestamp>.log suffix."""
    suffix = f"_{timestamp}.log"
    if log_name.endswith(suffix):
        return log_name[: -len(suffix)]
    return log_name


def report_logs(directory: Path, timestamp: str) -> List[Path]:
    """Log files of one report, in directory-listing (name) order."""
    return sorted(directory.glob(f"*_{timestamp}.log"))


def build_markdown(directory: Path, timestamp: str) -> str:
    """Concatenate every log of the report under a level-2 heading."""
    lines = [f"# System Monitoring Report ({timestamp})\n"]
    for log_path in report_logs(directory, timestamp):
        lines.append("\n")
        lines.append(f"## {section_name(log_path.name, timestamp)}\n")
        lines.append("\n")
        lines.append(log_path.read_text(encoding="utf-8", errors="replace"))
    return "".join(lines)
