"""History screen - List of past translations with a clear action."""

from typing import List

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

EMPTY_HISTORY_MESSAGE = "No translation history yet"


class HistoryScreen(QWidget):
    """Shows persisted history lines, oldest first.

    Signals:
        clear_requested: Emitted when the clear button is clicked.
        back_requested: Emitted when the back button is clicked.
    """

    clear_requested = Signal()
    back_requested = Signal()

    def __init__(self):
        super().__init__()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        header_layout = QHBoxLayout()
        back_btn = QPushButton("← Back")
        back_btn.clicked.connect(self.back_requested.emit)
        title = QLabel("Translation History")
        title.setStyleSheet("font-weight: bold; font-size: 18px;")
        header_layout.addWidget(back_btn)
        header_layout.addWidget(title)
        header_layout.addStretch()
        layout.addLayout(header_layout)

        self.empty_label = QLabel(EMPTY_HISTORY_MESSAGE)
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_label.setStyleSheet("color: gray; font-size: 14px;")
        layout.addWidget(self.empty_label)

        self.history_list = QListWidget()
        self.history_list.setWordWrap(True)
        layout.addWidget(self.history_list, 1)

        self.clear_button = QPushButton("Clear History")
        self.clear_button.clicked.connect(self.clear_requested.emit)
        layout.addWidget(self.clear_button)

        self.display_entries([])

    def display_entries(self, entries: List[str]) -> None:
        """Replace the list contents, or show the placeholder when empty."""
        self.history_list.clear()
        if not entries:
            self.history_list.hide()
            self.empty_label.show()
            self.clear_button.setEnabled(False)
            return

        self.empty_label.hide()
        self.history_list.show()
        self.history_list.addItems(entries)
        self.clear_button.setEnabled(True)
