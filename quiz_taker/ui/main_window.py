"""Qt main window switching between library, authoring, taking and results."""

from __future__ import annotations

from enum import Enum, auto
import logging
from pathlib import Path

from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from quiz_taker.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from quiz_taker.constants.quiz_constants import DEFAULT_QUIZ_FILE
from quiz_taker.constants.ui_constants import (
    DEFAULT_QUIZ_FONT_SIZE,
    DEFAULT_UI_FONT_SIZE,
    EMPTY_QUIZ_MESSAGE,
    IMPORT_DIALOG_TITLE,
    IMPORT_FILE_FILTER,
    MODE_BUTTON_IMPORT,
    MODE_BUTTON_LIBRARY,
    WINDOW_TITLE,
)
from quiz_taker.core.errors import NotFoundError
from quiz_taker.core.models import QuizId, SessionState
from quiz_taker.core.quiz_importer import QuizImportError
from quiz_taker.core.quiz_manager import QuizManager
from quiz_taker.styling import Theme
from quiz_taker.styling.styles import Styles
from quiz_taker.ui.components.authoring_panel import AuthoringPanel
from quiz_taker.ui.components.library_panel import LibraryPanel
from quiz_taker.ui.components.results_panel import ResultsPanel
from quiz_taker.ui.components.taking_panel import TakingPanel
from quiz_taker.ui.dialog_helpers import confirm_abandon_attempt, show_error, show_info, show_warning
from quiz_taker.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class AppMode(Enum):
    """High-level UI mode of the main window."""

    LIBRARY = auto()
    AUTHORING = auto()
    TAKING = auto()
    RESULTS = auto()


class QuizMainWindow(QMainWindow):
    """Main Qt window wiring the panels to one QuizManager."""

    def __init__(self, quiz_manager: QuizManager) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.quiz_manager = quiz_manager
        self._mode = AppMode.LIBRARY

        self._ui_font_size: int = DEFAULT_UI_FONT_SIZE
        self._quiz_font_size: int = DEFAULT_QUIZ_FONT_SIZE
        self._theme = Theme.LIGHT
        self._shuffle_seed: int | None = None

        self._build_ui()
        self._apply_styles()
        self.quiz_manager.set_shuffle_seed(self._shuffle_seed)
        self._auto_load_default_quizzes()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_mode_buttons(root_layout)

        self.mode_stack = QStackedWidget(self)

        self.library_panel = LibraryPanel(
            self.quiz_manager,
            on_edit_quiz=self._open_authoring,
            on_take_quiz=self._start_quiz,
            parent=self,
        )
        self.authoring_panel = AuthoringPanel(
            self.quiz_manager,
            on_done=self._show_library,
            parent=self,
        )
        self.taking_panel = TakingPanel(
            self.quiz_manager,
            on_finished=self._show_results,
            on_leave=self._show_library,
            parent=self,
        )
        self.results_panel = ResultsPanel(
            self.quiz_manager,
            on_retry=self._show_taking,
            on_back_to_library=self._show_library,
            parent=self,
        )

        self.mode_stack.addWidget(self.library_panel)
        self.mode_stack.addWidget(self.authoring_panel)
        self.mode_stack.addWidget(self.taking_panel)
        self.mode_stack.addWidget(self.results_panel)

        root_layout.addWidget(self.mode_stack)

        self._set_mode(AppMode.LIBRARY)

    def _build_mode_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.library_mode_button = QPushButton(MODE_BUTTON_LIBRARY, self)
        self.library_mode_button.setCheckable(True)
        self.library_mode_button.clicked.connect(self._handle_library_button)
        button_row.addWidget(self.library_mode_button)

        self.import_button = QPushButton(MODE_BUTTON_IMPORT, self)
        self.import_button.clicked.connect(self._handle_import_quizzes)
        button_row.addWidget(self.import_button)

        button_row.addStretch()

        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton("Settings", self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    def _set_mode(self, mode: AppMode) -> None:
        self._mode = mode
        self.library_mode_button.setChecked(mode == AppMode.LIBRARY)
        index_map = {
            AppMode.LIBRARY: 0,
            AppMode.AUTHORING: 1,
            AppMode.TAKING: 2,
            AppMode.RESULTS: 3,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])

    # --- Navigation ---

    def _handle_library_button(self) -> None:
        if self._mode == AppMode.AUTHORING and not self.authoring_panel.check_unsaved_changes():
            self.library_mode_button.setChecked(False)
            return
        if self._mode == AppMode.TAKING:
            if not confirm_abandon_attempt(self):
                self.library_mode_button.setChecked(False)
                return
            self.quiz_manager.stop_session()
        elif self._mode == AppMode.RESULTS:
            self.quiz_manager.stop_session()
        self._show_library()

    def _show_library(self) -> None:
        self.library_panel.refresh_quizzes()
        self._set_mode(AppMode.LIBRARY)

    def _open_authoring(self, quiz_id: QuizId) -> None:
        try:
            self.authoring_panel.set_quiz(quiz_id)
        except NotFoundError as exc:
            show_error(self, "Quiz not found", str(exc))
            return
        self._set_mode(AppMode.AUTHORING)

    def _start_quiz(self, quiz_id: QuizId) -> None:
        try:
            snapshot = self.quiz_manager.select_quiz(quiz_id)
        except NotFoundError as exc:
            show_error(self, "Quiz not found", str(exc))
            return
        if snapshot.question_count == 0:
            self.quiz_manager.stop_session()
            show_warning(self, "Empty quiz", EMPTY_QUIZ_MESSAGE)
            return
        self._show_taking()

    def _show_taking(self) -> None:
        self.taking_panel.refresh()
        self._set_mode(AppMode.TAKING)

    def _show_results(self) -> None:
        if self.quiz_manager.get_snapshot().state is not SessionState.COMPLETED:
            self._show_taking()
            return
        self.results_panel.show_results()
        self._set_mode(AppMode.RESULTS)

    # --- Import ---

    def _handle_import_quizzes(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            IMPORT_DIALOG_TITLE,
            str(Path.home()),
            IMPORT_FILE_FILTER,
        )
        if not file_path:
            return

        try:
            quiz_ids = self.quiz_manager.import_quizzes(Path(file_path))
        except (OSError, QuizImportError) as exc:
            show_error(self, "Import failed", str(exc))
            return

        self.library_panel.refresh_quizzes(select_quiz_id=quiz_ids[-1])
        show_info(self, "Quizzes imported", f"Successfully imported {len(quiz_ids)} quiz(zes).")

    def _auto_load_default_quizzes(self) -> None:
        default_quiz_path = Path(DEFAULT_QUIZ_FILE)
        if not default_quiz_path.exists():
            return

        try:
            self.quiz_manager.import_quizzes(default_quiz_path)
        except (OSError, QuizImportError) as exc:
            logger.warning("Could not auto-load %s: %s", default_quiz_path, exc)
            return
        self.library_panel.refresh_quizzes()

    # --- Dialogs ---

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._ui_font_size,
            self._quiz_font_size,
            self._theme,
            self._shuffle_seed,
        )
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._quiz_font_size = dialog.get_quiz_font_size()
            self._theme = dialog.get_theme()
            self._shuffle_seed = dialog.get_shuffle_seed()

            self.quiz_manager.set_shuffle_seed(self._shuffle_seed)
            self._apply_styles()
            if self._mode == AppMode.TAKING:
                self.taking_panel.refresh()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme))

        ui_style = f"font-size: {self._ui_font_size}pt;"
        buttons = [
            self.library_mode_button,
            self.import_button,
            self.about_button,
            self.help_button,
            self.settings_button,
        ]
        for button in buttons:
            button.setStyleSheet(ui_style)

        self.library_panel.apply_font_size(self._ui_font_size)
        self.authoring_panel.apply_font_size(self._ui_font_size)
        self.authoring_panel.set_theme(self._theme)
        self.taking_panel.set_theme(self._theme)
        self.taking_panel.apply_font_size(self._quiz_font_size)
        self.results_panel.set_theme(self._theme)
        self.results_panel.apply_font_size(self._quiz_font_size)
