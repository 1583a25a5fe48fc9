"""User interface backends."""
from ..config.display_config import DisplayConfig
from .dialogs import Dialogs


def create_dialogs(display: DisplayConfig) -> Dialogs:
    """Instantiate the configured dialog backend."""
    if display.backend == "zenity":
        from .zenity_dialogs import ZenityDialogs
        return ZenityDialogs()

    from .terminal_dialogs import TerminalDialogs
    return TerminalDialogs()
