"""UI layer - PySide6 presentation components."""

from .history_screen import EMPTY_HISTORY_MESSAGE, HistoryScreen
from .main_window import MainWindow
from .translator_screen import TranslatorScreen

__all__ = ["MainWindow", "TranslatorScreen", "HistoryScreen", "EMPTY_HISTORY_MESSAGE"]
