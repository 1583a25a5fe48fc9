import io

import pytest
from rich.console import Console

from hostsysmon.ui import terminal_dialogs
from hostsysmon.ui.terminal_dialogs import TerminalDialogs


@pytest.fixture
def answers(monkeypatch):
    """Scripted Prompt.ask answers; EOFError entries are raised."""
    pending = []

    def ask(*args, **kwargs):
        answer = pending.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    monkeypatch.setattr(terminal_dialogs.Prompt, "ask", ask)
    return pending


@pytest.fixture
def dialogs():
    return TerminalDialogs(Console(file=io.StringIO(), width=100))


def output(dialogs):
    return dialogs.console.file.getvalue()


def test_choose_returns_key(dialogs, answers):
    answers.append(" 2 ")

    assert dialogs.choose("Menu", [("1", "Run"), ("2", "View")]) == "2"
    assert "View" in output(dialogs)


@pytest.mark.parametrize("answer", ["", EOFError()])
def test_choose_cancelled(dialogs, answers, answer):
    answers.append(answer)

    assert dialogs.choose("Menu", [("1", "Run")]) is None


def test_select_path_by_number(dialogs, answers, tmp_path):
    (tmp_path / "b_report").mkdir()
    (tmp_path / "a.log").write_text("x")
    answers.append("2")

    assert dialogs.select_path("Pick", tmp_path) == tmp_path / "b_report"
    assert "b_report/" in output(dialogs)


def test_select_path_by_relative_name(dialogs, answers, tmp_path):
    answers.append("missing.md")

    assert dialogs.select_path("Pick", tmp_path) == tmp_path / "missing.md"


def test_select_path_cancelled(dialogs, answers, tmp_path):
    answers.append("")

    assert dialogs.select_path("Pick", tmp_path) is None


def test_alert_waits_for_acknowledgement(dialogs, answers):
    answers.append("")

    dialogs.alert("ALERT: High CPU Usage (97%)")

    assert answers == []
    assert "High CPU Usage" in output(dialogs)
