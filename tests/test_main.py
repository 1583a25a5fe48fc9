import logging

import pytest

from hostsysmon import main as main_module
from hostsysmon.core.errors import HostSysmonError

from .conftest import FakeDialogs


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("hostsysmon")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class StubGenerator:
    runs = 0

    def __init__(self, config, dialogs):
        self.config = config

    def run(self):
        StubGenerator.runs += 1
        report_dir = self.config.log_dir / "2026-10-18_12-00-00"
        report_dir.mkdir(parents=True)
        markdown = report_dir / "report_2026-10-18_12-00-00.md"
        markdown.write_text("# report")
        return type("Report", (), {"markdown_path": markdown})()


def test_parser_defaults():
    args = main_module.build_parser().parse_args([])

    assert args.config is None
    assert args.backend is None
    assert not args.once


def test_once_runs_a_single_report(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(main_module, "create_dialogs", lambda display: FakeDialogs())
    monkeypatch.setattr(main_module, "ReportGenerator", StubGenerator)
    log_dir = tmp_path / "logs"

    assert main_module.main(["--once", "--log-dir", str(log_dir)]) == 0

    assert StubGenerator.runs == 1
    assert capsys.readouterr().out.strip().endswith("report_2026-10-18_12-00-00.md")
    assert (log_dir / "monitoring.log").exists()


def test_dashboard_exit_status(tmp_path, monkeypatch):
    monkeypatch.setattr(main_module, "create_dialogs", lambda display: FakeDialogs(choices=["3"]))

    assert main_module.main(["--log-dir", str(tmp_path / "logs")]) == 0


def test_missing_zenity_is_reported(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("hostsysmon.collectors.base.shutil.which", lambda tool: None)

    status = main_module.main(["--backend", "zenity", "--log-dir", str(tmp_path / "logs")])

    assert status == 1
    assert "zenity not found" in capsys.readouterr().err


class CollidingGenerator(StubGenerator):
    def run(self):
        raise HostSysmonError("Could not create a new report directory in logs")


def test_once_reports_generator_failure(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(main_module, "create_dialogs", lambda display: FakeDialogs())
    monkeypatch.setattr(main_module, "ReportGenerator", CollidingGenerator)

    assert main_module.main(["--once", "--log-dir", str(tmp_path / "logs")]) == 1
    assert "Could not create a new report directory" in capsys.readouterr().err
