"""Shared fakes for the hostsysmon tests."""
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from hostsysmon.collectors.base import MetricCollector
from hostsysmon.collectors.system_models import CATEGORIES, Readings
from hostsysmon.config.config import Config
from hostsysmon.core.errors import CollectorError
from hostsysmon.ui.dialogs import Dialogs


class FakeDialogs(Dialogs):
    """Records every dialog and replays scripted answers."""

    def __init__(self, choices=(), paths=()):
        self.choices = list(choices)
        self.paths = list(paths)
        self.calls = []

    def alert(self, message):
        self.calls.append(("alert", message))

    def info(self, message):
        self.calls.append(("info", message))

    def error(self, message):
        self.calls.append(("error", message))

    def choose(self, title, options):
        self.calls.append(("choose", title))
        return self.choices.pop(0)

    def select_path(self, title, start):
        self.calls.append(("select_path", Path(start)))
        return self.paths.pop(0)

    def show_text(self, path, title):
        self.calls.append(("show_text", path))

    def messages(self, kind):
        return [value for call, value in self.calls if call == kind]


class FakeCollector(MetricCollector):
    def __init__(self, name, content=None, error=None):
        self.name = name
        self.content = content if content is not None else f"=== {name} ===\n{name} output\n"
        self.error = error

    def collect(self):
        if self.error:
            raise self.error
        return self.content


class FakeSampler:
    def __init__(self, readings=None, error=None):
        self.readings = readings or Readings()
        self.error = error

    def sample(self):
        if self.error:
            raise self.error
        return self.readings


class FakeRenderer:
    def __init__(self, available=True):
        self._available = available
        self.rendered = []

    def available(self):
        return self._available

    def render(self, markdown_path):
        html_path = markdown_path.with_suffix(".html")
        html_path.write_text("<html></html>")
        self.rendered.append(markdown_path)
        return html_path


class FakeLauncher:
    def __init__(self, error=None):
        self.opened = []
        self.error = error

    def open(self, path):
        if self.error:
            raise self.error
        self.opened.append(path)


def make_clock(*moments):
    """Clock returning the given moments in order, then advancing by one second."""
    pending = list(moments)
    state = {"last": moments[-1] if moments else datetime(2026, 10, 18, 12, 0, 0)}

    def clock():
        if pending:
            state["last"] = pending.pop(0)
        else:
            state["last"] = state["last"] + timedelta(seconds=1)
        return state["last"]

    return clock


@pytest.fixture
def config(tmp_path):
    return Config(log_dir=tmp_path / "monitoring_logs")


@pytest.fixture
def dialogs():
    return FakeDialogs()


@pytest.fixture
def collectors():
    return [FakeCollector(name) for name in CATEGORIES]


@pytest.fixture
def failing_collector():
    return FakeCollector("gpu", error=CollectorError("lshw exploded"))
