"""Report generation: collect, check thresholds, aggregate, render."""
import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Sequence, Tuple

from ..collectors.base import MetricCollector
from ..collectors.reading_sampler import ReadingSampler
from ..collectors.registry import default_collectors
from ..collectors.system_models import MetricSample
from ..config.config import Config
from .errors import HostSysmonError, RenderError
from .html_renderer import HtmlRenderer
from .report import (
    Report,
    build_markdown,
    format_timestamp,
    log_file_name,
    markdown_file_name,
    report_logs,
)
from .threshold_checker import ThresholdChecker

logger = logging.getLogger(__name__)

HTML_SKIPPED_NOTICE = "Pandoc not installed. HTML report not generated."

# Attempts at finding a free timestamp before giving up
MAX_DIRECTORY_ATTEMPTS = 5


class ReportGenerator:
    """Produces one new, independent Report per run."""

    def __init__(
        self,
        config: Config,
        dialogs,
        collectors: Optional[Sequence[MetricCollector]] = None,
        sampler: Optional[ReadingSampler] = None,
        checker: Optional[ThresholdChecker] = None,
        renderer: Optional[HtmlRenderer] = None,
        clock: Callable[[], datetime] = datetime.now,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config
        self.dialogs = dialogs
        self.collectors = list(collectors) if collectors is not None else default_collectors(config.collection)
        self.sampler = sampler or ReadingSampler(config.collection)
        self.checker = checker or ThresholdChecker(config.thresholds, dialogs)
        self.renderer = renderer or HtmlRenderer(config.display.html_renderer)
        self.clock = clock
        self.sleep = sleep

    def run(self) -> Report:
        """Run one monitoring cycle and return the report produced."""
        moment, report_dir = self._create_report_dir()
        timestamp = format_timestamp(moment)
        logger.info("Starting monitoring run %s", timestamp)

        for collector in self.collectors:
            sample = self._collect(collector, moment)
            self._write_log(sample, report_dir, timestamp)

        self._check_thresholds()

        markdown_path = report_dir / markdown_file_name(timestamp)
        markdown_path.write_text(build_markdown(report_dir, timestamp), encoding="utf-8")

        html_path = self._render_html(markdown_path)

        self.dialogs.info(f"Monitoring completed. Report saved: {markdown_path}")
        logger.info("Report saved: %s", markdown_path)

        return Report(
            timestamp=timestamp,
            directory=report_dir,
            log_files=report_logs(report_dir, timestamp),
            markdown_path=markdown_path,
            html_path=html_path,
        )

    def _create_report_dir(self) -> Tuple[datetime, Path]:
        """Create the timestamped directory, waiting out a same-second collision."""
        for _ in range(MAX_DIRECTORY_ATTEMPTS):
            moment = self.clock()
            report_dir = self.config.log_dir / format_timestamp(moment)
            try:
                report_dir.mkdir(parents=True, exist_ok=False)
                return moment, report_dir
            except FileExistsError:
                logger.debug("Report directory %s exists, waiting", report_dir)
                self.sleep(1.0 - moment.microsecond / 1_000_000)
        raise HostSysmonError(f"Could not create a new report directory in {self.config.log_dir}")

    def _collect(self, collector: MetricCollector, moment: datetime) -> MetricSample:
        """Capture one collector's output; failures become an explanatory message."""
        try:
            content = collector.collect()
        except Exception as e:
            logger.exception("Collector %s failed", collector.name)
            content = f"Collection of {collector.name} metrics failed: {e}\n"
        return MetricSample(category=collector.name, content=content, timestamp=moment)

    def _write_log(self, sample: MetricSample, report_dir: Path, timestamp: str) -> None:
        log_path = report_dir / log_file_name(sample.category, timestamp)
        try:
            log_path.write_text(sample.content, encoding="utf-8")
        except OSError:
            logger.exception("Could not write %s", log_path)

    def _check_thresholds(self) -> None:
        try:
            readings = self.sampler.sample()
            self.checker.check(readings)
        except Exception:
            logger.exception("Threshold check failed")

    def _render_html(self, markdown_path: Path) -> Optional[Path]:
        if not self.renderer.available():
            self._append_notice(HTML_SKIPPED_NOTICE)
            return None
        try:
            return self.renderer.render(markdown_path)
        except RenderError as e:
            self._append_notice(f"HTML report not generated: {e}")
            return None

    def _append_notice(self, message: str) -> None:
        """Append to the persistent monitoring log kept outside the report."""
        try:
            with open(self.config.monitoring_log_path, "a", encoding="utf-8") as f:
                f.write(message + "\n")
        except OSError:
            logger.exception("Could not append to %s", self.config.monitoring_log_path)
