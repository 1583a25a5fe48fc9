"""Exception hierarchy for hostsysmon."""


class HostSysmonError(Exception):
    """Base class for all hostsysmon errors."""


class CollectorError(HostSysmonError):
    """A metric collector could not produce its output."""


class ToolNotFoundError(CollectorError):
    """An external command is not installed."""

    def __init__(self, tool: str):
        super().__init__(f"{tool} not found")
        self.tool = tool


class ReadingParseError(HostSysmonError):
    """A numeric reading could not be extracted from tool output."""


class RenderError(HostSysmonError):
    """The Markdown report could not be rendered to HTML."""
