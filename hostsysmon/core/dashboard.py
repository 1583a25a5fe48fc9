"""Interactive menu loop driving monitoring runs and report browsing."""
import logging
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)

MENU_TITLE = "System Monitoring Dashboard"
MENU_OPTIONS = [
    ("1", "Run System Monitoring"),
    ("2", "View Historical Reports"),
    ("3", "Exit"),
]


class DashboardState(Enum):
    MAIN_MENU = "main_menu"
    RUNNING = "running"
    BROWSING = "browsing"
    EXITED = "exited"


class Dashboard:
    """State machine over {MAIN_MENU, RUNNING, BROWSING, EXITED}.

    Every action runs to completion and control returns to the main menu;
    only the Exit choice leaves the loop.
    """

    def __init__(self, dialogs, generator, browser):
        self.dialogs = dialogs
        self.generator = generator
        self.browser = browser
        self.state = DashboardState.MAIN_MENU

    def run(self) -> int:
        """Loop until the user exits; returns the process exit status."""
        while self.state is not DashboardState.EXITED:
            self.step()
        return 0

    def step(self) -> DashboardState:
        """Advance the state machine by one transition."""
        if self.state is DashboardState.MAIN_MENU:
            choice = self.dialogs.choose(MENU_TITLE, MENU_OPTIONS)
            self.state = self.transition(choice)
        elif self.state is DashboardState.RUNNING:
            self._perform("Monitoring run", self.generator.run)
            self.state = DashboardState.MAIN_MENU
        elif self.state is DashboardState.BROWSING:
            self._perform("Report browsing", self.browser.browse)
            self.state = DashboardState.MAIN_MENU
        return self.state

    def transition(self, choice: Optional[str]) -> DashboardState:
        """Map a menu choice to the next state."""
        if choice == "1":
            return DashboardState.RUNNING
        if choice == "2":
            return DashboardState.BROWSING
        if choice == "3":
            self.dialogs.info("Goodbye!")
            return DashboardState.EXITED
        logger.debug("Invalid menu choice: %r", choice)
        self.dialogs.error("Invalid option. Please try again.")
        return DashboardState.MAIN_MENU

    def _perform(self, label: str, action: Callable[[], object]) -> None:
        try:
            action()
        except Exception as e:
            logger.exception("%s failed", label)
            self.dialogs.error(f"{label} failed: {e}")
