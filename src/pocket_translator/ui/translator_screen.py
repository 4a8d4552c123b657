"""Translator screen - Text input, language pickers, and translation result."""

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QSizePolicy,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from pocket_translator.core import DEFAULT_SOURCE_LANGUAGE, DEFAULT_TARGET_LANGUAGE, Language


class TranslatorScreen(QWidget):
    """Primary screen: what to translate, into which language, and the result."""

    text_changed = Signal(str)
    source_language_changed = Signal(str)
    target_language_changed = Signal(str)
    swap_clicked = Signal()
    translate_clicked = Signal()
    history_clicked = Signal()

    def __init__(self):
        super().__init__()

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(12, 12, 12, 12)
        main_layout.setSpacing(8)

        title = QLabel("Translator")
        title.setStyleSheet("font-weight: bold; font-size: 18px;")
        main_layout.addWidget(title)

        self.input_text = QTextEdit()
        self.input_text.setPlaceholderText("Enter text to translate")
        self.input_text.setFixedHeight(120)
        self.input_text.textChanged.connect(self._on_text_changed)
        main_layout.addWidget(self.input_text)

        languages_layout = QHBoxLayout()
        self.source_combo = self._build_language_combo(DEFAULT_SOURCE_LANGUAGE)
        self.target_combo = self._build_language_combo(DEFAULT_TARGET_LANGUAGE)
        self.source_combo.currentIndexChanged.connect(self._on_source_changed)
        self.target_combo.currentIndexChanged.connect(self._on_target_changed)

        self.swap_button = QPushButton("⇄")
        self.swap_button.setFixedWidth(40)
        self.swap_button.setToolTip("Swap languages")
        self.swap_button.clicked.connect(self.swap_clicked.emit)

        languages_layout.addWidget(QLabel("From"))
        languages_layout.addWidget(self.source_combo)
        languages_layout.addWidget(self.swap_button)
        languages_layout.addWidget(QLabel("To"))
        languages_layout.addWidget(self.target_combo)
        languages_layout.addStretch()
        main_layout.addLayout(languages_layout)

        actions_layout = QHBoxLayout()
        self.translate_button = QPushButton("Translate")
        self.translate_button.setEnabled(False)
        self.translate_button.clicked.connect(self.translate_clicked.emit)

        # Indeterminate bar shown in place of the translate button while a request runs
        self.busy_indicator = QProgressBar()
        self.busy_indicator.setRange(0, 0)
        self.busy_indicator.setTextVisible(False)
        self.busy_indicator.setFixedWidth(120)
        self.busy_indicator.hide()

        actions_layout.addWidget(self.translate_button)
        actions_layout.addWidget(self.busy_indicator)
        actions_layout.addStretch()
        main_layout.addLayout(actions_layout)

        self.result_label = QLabel("Translation")
        self.result_label.setStyleSheet("font-weight: bold;")
        main_layout.addWidget(self.result_label)

        self.result_text = QTextEdit()
        self.result_text.setReadOnly(True)
        self.result_text.setMinimumHeight(120)
        self.result_text.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        main_layout.addWidget(self.result_text, 1)

        # Hidden until the first translation arrives
        self.result_label.hide()
        self.result_text.hide()

        history_btn = QPushButton("History")
        history_btn.setMaximumHeight(32)
        history_btn.clicked.connect(self.history_clicked.emit)
        main_layout.addWidget(history_btn)

    def _build_language_combo(self, selected: Language) -> QComboBox:
        combo = QComboBox()
        for language in Language:
            combo.addItem(language.display_name, language.code)
        combo.setCurrentIndex(combo.findData(selected.code))
        return combo

    def _on_text_changed(self):
        self.text_changed.emit(self.input_text.toPlainText())

    def _on_source_changed(self, _index: int):
        self.source_language_changed.emit(self.source_combo.currentData())

    def _on_target_changed(self, _index: int):
        self.target_language_changed.emit(self.target_combo.currentData())

    def set_languages(self, source_code: str, target_code: str) -> None:
        """Select languages without re-emitting change signals."""
        for combo, code in ((self.source_combo, source_code), (self.target_combo, target_code)):
            combo.blockSignals(True)
            combo.setCurrentIndex(combo.findData(code))
            combo.blockSignals(False)

    def set_translate_enabled(self, enabled: bool) -> None:
        self.translate_button.setEnabled(enabled)

    def set_loading(self, loading: bool) -> None:
        """Swap the translate button for the busy indicator while loading."""
        self.translate_button.setVisible(not loading)
        self.busy_indicator.setVisible(loading)
        if loading:
            self.translate_button.setEnabled(False)

    def show_translation(self, text: str) -> None:
        self.result_text.setPlainText(text)
        self.result_label.show()
        self.result_text.show()
