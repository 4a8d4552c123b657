"""Main Window - Application shell hosting the translator and history screens."""

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow, QStackedWidget

from pocket_translator.ui.history_screen import HistoryScreen
from pocket_translator.ui.translator_screen import TranslatorScreen


class MainWindow(QMainWindow):
    """Provides the application shell and switches between screens."""

    def __init__(self, translator_screen: TranslatorScreen, history_screen: HistoryScreen):
        super().__init__()
        self.setWindowTitle("Pocket Translator")
        self.setGeometry(100, 100, 480, 640)

        self.translator_screen = translator_screen
        self.history_screen = history_screen

        self._setup_ui()
        self._create_menu_bar()

    def _setup_ui(self):
        """Stack both screens; only one is visible at a time."""
        self.stack = QStackedWidget()
        self.stack.addWidget(self.translator_screen)
        self.stack.addWidget(self.history_screen)
        self.setCentralWidget(self.stack)

    def _create_menu_bar(self):
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("&File")

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    def display_translator_view(self):
        self.stack.setCurrentWidget(self.translator_screen)

    def display_history_view(self):
        self.stack.setCurrentWidget(self.history_screen)

    def is_showing_history(self) -> bool:
        return self.stack.currentWidget() is self.history_screen
