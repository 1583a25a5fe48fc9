"""Collector interface and helpers for running external tools."""
import logging
import shutil
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core.errors import CollectorError, ToolNotFoundError

logger = logging.getLogger(__name__)


def tool_available(tool: str) -> bool:
    """Return True if the command is on PATH."""
    return shutil.which(tool) is not None


def run_command(cmd: Sequence[str], timeout: Optional[float] = None) -> str:
    """Run an external tool and return its stdout.

    stderr is discarded. A non-zero exit status is only an error when the
    tool printed nothing at all, since several tools (smartctl, lshw)
    report partial results with a failing status.
    """
    if not tool_available(cmd[0]):
        raise ToolNotFoundError(cmd[0])

    logger.debug("Running %s", " ".join(cmd))
    try:
        result = subprocess.run(
            list(cmd),
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise CollectorError(f"{cmd[0]} timed out after {timeout}s") from e
    except OSError as e:
        raise CollectorError(f"{cmd[0]} could not be started: {e}") from e

    if result.returncode != 0 and not result.stdout.strip():
        detail = result.stderr.strip() or f"exit status {result.returncode}"
        raise CollectorError(f"{cmd[0]} failed: {detail}")
    return result.stdout


class MetricCollector(ABC):
    """Produces the raw text for one metric category."""

    name: str = ""

    @abstractmethod
    def collect(self) -> str:
        """Return the captured text, raising CollectorError on failure."""


@dataclass(frozen=True)
class Section:
    """One command whose output goes into a collector's log."""
    command: Sequence[str]
    title: Optional[str] = None
    optional: bool = False
    skip_message: str = ""
    quiet: bool = False


class CommandCollector(MetricCollector):
    """Collector built from a list of command sections.

    Each section is independent: a missing or failing tool yields a
    placeholder line and the remaining sections still run.
    """

    def __init__(self, name: str, sections: List[Section], timeout: Optional[float] = None):
        self.name = name
        self.sections = sections
        self.timeout = timeout

    def collect(self) -> str:
        parts = []
        for section in self.sections:
            if section.title:
                parts.append(f"=== {section.title} ===\n")
            parts.append(self._run_section(section))
        return "".join(parts)

    def _run_section(self, section: Section) -> str:
        """Run one section, turning failures into explanatory text."""
        try:
            output = run_command(section.command, timeout=self.timeout)
        except ToolNotFoundError as e:
            logger.info("%s collector: %s", self.name, e)
            if section.optional:
                return f"{e.tool} not found. {section.skip_message}\n"
            return f"{e.tool} not found. Output unavailable.\n"
        except CollectorError as e:
            logger.warning("%s collector: %s", self.name, e)
            if section.quiet:
                return ""
            return f"Collection failed: {e}\n"

        if output and not output.endswith("\n"):
            output += "\n"
        return output
