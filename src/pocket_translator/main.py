"""Main entry point for the translator application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from pocket_translator.coordinators import HistoryCoordinator, TranslationCoordinator
from pocket_translator.io import HistoryStore, QSettingsStorage
from pocket_translator.logging_config import configure_logging
from pocket_translator.services import MyMemoryTranslationService, SettingsManager
from pocket_translator.ui import HistoryScreen, MainWindow, TranslatorScreen

logger = logging.getLogger(__name__)


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Configuration and logging
    settings_manager = SettingsManager()
    configure_logging(settings_manager.get_log_level())

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Pocket Translator")
    app.setOrganizationName("PocketTranslator")

    # 3. Initialize Infrastructure
    storage = QSettingsStorage(file_path=settings_manager.get_settings_file())
    history_store = HistoryStore(storage)
    translation_service = MyMemoryTranslationService(api_url=settings_manager.get_api_url())
    logger.info("Using translation endpoint %s", translation_service.api_url)

    # 4. Construct UI
    translator_screen = TranslatorScreen()
    history_screen = HistoryScreen()
    main_window = MainWindow(translator_screen, history_screen)

    # 5. Instantiate Coordinators (Dependency Injection)
    translation_coordinator = TranslationCoordinator(
        translation_service=translation_service,
        history_store=history_store,
    )
    history_coordinator = HistoryCoordinator(
        history_screen=history_screen,
        history_store=history_store,
        main_window=main_window,
    )

    # 6. Signal Wiring (Connect UI signals to coordinator slots and back)
    translator_screen.text_changed.connect(translation_coordinator.set_source_text)
    translator_screen.source_language_changed.connect(translation_coordinator.set_source_language)
    translator_screen.target_language_changed.connect(translation_coordinator.set_target_language)
    translator_screen.swap_clicked.connect(translation_coordinator.swap_languages)
    translator_screen.translate_clicked.connect(translation_coordinator.request_translation)
    translator_screen.history_clicked.connect(history_coordinator.show_history)

    translation_coordinator.can_translate_changed.connect(translator_screen.set_translate_enabled)
    translation_coordinator.loading_changed.connect(translator_screen.set_loading)
    translation_coordinator.translation_completed.connect(translator_screen.show_translation)
    translation_coordinator.languages_changed.connect(translator_screen.set_languages)

    # 7. Show UI and start event loop
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
