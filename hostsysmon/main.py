"""Main entry point for the hostsysmon dashboard."""
import argparse
import logging
import sys
from dataclasses import replace

from .config.config_manager import ConfigManager
from .config.display_config import BACKENDS
from .core.dashboard import Dashboard
from .core.errors import HostSysmonError, ToolNotFoundError
from .core.logging_setup import setup_logging
from .core.report_browser import ReportBrowser
from .core.report_generator import ReportGenerator
from .ui import create_dialogs
from .ui.launcher import BrowserLauncher

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Host System Monitor")
    parser.add_argument("--config", default=None, help="YAML configuration file")
    parser.add_argument("--log-dir", default=None, help="directory holding all reports")
    parser.add_argument("--backend", choices=BACKENDS, default=None, help="dialog backend")
    parser.add_argument("--once", action="store_true",
                        help="run one monitoring cycle without the menu")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv=None) -> int:
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)

    # Load configuration - let it crash if bad
    config = ConfigManager.load_config(args.config)
    if args.log_dir:
        config = replace(config, log_dir=args.log_dir)
    if args.backend:
        config = replace(config, display=replace(config.display, backend=args.backend))

    config.log_dir.mkdir(parents=True, exist_ok=True)
    setup_logging(config.monitoring_log_path, verbose=args.verbose)

    try:
        dialogs = create_dialogs(config.display)
    except ToolNotFoundError as e:
        print(f"Cannot use the {config.display.backend} backend: {e}", file=sys.stderr)
        return 1

    generator = ReportGenerator(config, dialogs)
    if args.once:
        try:
            report = generator.run()
        except HostSysmonError as e:
            print(f"Monitoring run failed: {e}", file=sys.stderr)
            return 1
        print(report.markdown_path)
        return 0

    browser = ReportBrowser(config.log_dir, dialogs, BrowserLauncher(config.display.browser_command))
    dashboard = Dashboard(dialogs, generator, browser)
    try:
        return dashboard.run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
