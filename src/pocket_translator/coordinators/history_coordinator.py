"""History Coordinator - Navigation to the history screen and the clear action."""

import logging

from PySide6.QtCore import QObject, Slot

from pocket_translator.io import HistoryStore
from pocket_translator.ui import HistoryScreen, MainWindow

logger = logging.getLogger(__name__)


class HistoryCoordinator(QObject):
    """Manages history screen display and the clear action.

    Responsibilities:
    - Load persisted history into the history screen
    - Switch between translator and history views
    - Clear history and refresh the screen
    """

    def __init__(
        self,
        history_screen: HistoryScreen,
        history_store: HistoryStore,
        main_window: MainWindow,
    ):
        super().__init__()

        if history_screen is None:
            raise ValueError("HistoryScreen must not be None")
        if history_store is None:
            raise ValueError("HistoryStore must not be None")
        if main_window is None:
            raise ValueError("MainWindow must not be None")

        self.history_screen = history_screen
        self.history_store = history_store
        self.main_window = main_window

        # Wire history screen signals
        self.history_screen.clear_requested.connect(self.clear_history)
        self.history_screen.back_requested.connect(self.show_translator)

    @Slot()
    def show_history(self) -> None:
        """Reload history and display the history screen."""
        self.refresh()
        self.main_window.display_history_view()

    @Slot()
    def show_translator(self) -> None:
        self.main_window.display_translator_view()

    @Slot()
    def clear_history(self) -> None:
        """Wipe all history and show the empty state."""
        self.history_store.clear()
        self.refresh()

    def refresh(self) -> None:
        entries = self.history_store.list()
        logger.debug("Showing %d history entries", len(entries))
        self.history_screen.display_entries(entries)
