"""Component for adding questions to a quiz."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_taker.constants.quiz_constants import OPTION_LETTERS
from quiz_taker.constants.ui_constants import (
    AUTHORING_ADD_BUTTON,
    AUTHORING_DONE_BUTTON,
    PLACEHOLDER_QUESTION,
)
from quiz_taker.core.errors import InvalidInputError, NotFoundError
from quiz_taker.core.models import QuizId
from quiz_taker.core.quiz_manager import QuizManager
from quiz_taker.styling import Theme
from quiz_taker.styling.styles import Styles
from quiz_taker.ui.dialog_helpers import check_unsaved_changes, show_error, show_warning
from quiz_taker.ui.question_renderer import render_question


class AuthoringPanel(QWidget):
    """UI component for writing questions and appending them to a quiz."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_done: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_done = on_done
        self._quiz_id: QuizId | None = None
        self._has_unsaved_changes: bool = False
        self._theme = Theme.LIGHT

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.quiz_label = QLabel("", self)
        self.quiz_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.quiz_label)

        # Question input
        self.question_input = QPlainTextEdit(self)
        self.question_input.setPlaceholderText(PLACEHOLDER_QUESTION)
        self.question_input.textChanged.connect(self._on_input_changed)
        layout.addWidget(self.question_input)

        # Options input
        options_row = QHBoxLayout()
        self.option_inputs: list[QLineEdit] = []
        for label in OPTION_LETTERS:
            option_input = QLineEdit(self)
            option_input.setPlaceholderText(f"Option {label}")
            option_input.textChanged.connect(self._on_input_changed)
            options_row.addWidget(option_input)
            self.option_inputs.append(option_input)
        layout.addLayout(options_row)

        # Correct option selector
        selector_row = QHBoxLayout()
        selector_row.addWidget(QLabel("Correct option:", self))
        self.correct_option_combo = QComboBox(self)
        self.correct_option_combo.addItem("Select…", userData=None)
        for index, label in enumerate(OPTION_LETTERS):
            self.correct_option_combo.addItem(label, userData=index)
        self.correct_option_combo.currentIndexChanged.connect(self._on_input_changed)
        selector_row.addWidget(self.correct_option_combo)
        selector_row.addStretch()
        layout.addLayout(selector_row)

        # Preview
        self.preview_view = QWebEngineView(self)
        layout.addWidget(self.preview_view, stretch=1)

        # Actions
        action_row = QHBoxLayout()
        self.status_label = QLabel("", self)
        action_row.addWidget(self.status_label, stretch=1)

        self.add_button = QPushButton(AUTHORING_ADD_BUTTON, self)
        self.add_button.clicked.connect(self._handle_add_question)
        action_row.addWidget(self.add_button)

        self.done_button = QPushButton(AUTHORING_DONE_BUTTON, self)
        self.done_button.clicked.connect(self._handle_done)
        action_row.addWidget(self.done_button)
        layout.addLayout(action_row)

    def set_quiz(self, quiz_id: QuizId) -> None:
        """Point the panel at the quiz that new questions are appended to."""
        quiz = self.quiz_manager.get_quiz(quiz_id)
        self._quiz_id = quiz_id
        self.quiz_label.setText(f"Adding questions to: {quiz.name}")
        self.clear_fields()
        self._update_status(quiz.question_count)

    def _on_input_changed(self) -> None:
        self._has_unsaved_changes = True
        self._refresh_preview()

    def _handle_add_question(self) -> None:
        if self._quiz_id is None:
            return
        try:
            text, options, correct_answer = self._read_draft_from_inputs()
        except ValueError as exc:
            show_warning(self, "Invalid question", str(exc))
            return

        try:
            self.quiz_manager.add_question(self._quiz_id, text, options, correct_answer)
        except (InvalidInputError, NotFoundError) as exc:
            show_error(self, "Add failed", f"Could not add question: {exc}")
            return

        self.clear_fields()
        self._update_status(self.quiz_manager.get_quiz(self._quiz_id).question_count)

    def _handle_done(self) -> None:
        if self.check_unsaved_changes():
            self.on_done()

    def check_unsaved_changes(self) -> bool:
        """Prompt about a pending draft. Returns True if ok to proceed."""
        if not self._has_unsaved_changes or not self._has_any_input():
            return True

        result = check_unsaved_changes(self)

        if result is True:
            self._handle_add_question()
            return not self._has_unsaved_changes
        if result is False:
            self.clear_fields()
            return True
        return False

    def _read_draft_from_inputs(self) -> tuple[str, list[str], str]:
        question_text = self.question_input.toPlainText().strip()
        options = [field.text().strip() for field in self.option_inputs]
        if not question_text:
            raise ValueError("Enter the question text before adding.")
        if any(not option for option in options):
            raise ValueError("All four options must be filled in.")
        correct_data = self.correct_option_combo.currentData()
        if correct_data is None:
            raise ValueError("Select the correct option before adding.")
        return question_text, options, options[int(correct_data)]

    def _has_any_input(self) -> bool:
        return bool(self.question_input.toPlainText().strip()) or any(
            field.text().strip() for field in self.option_inputs
        )

    def clear_fields(self) -> None:
        self.question_input.clear()
        for input_field in self.option_inputs:
            input_field.clear()
        self.correct_option_combo.setCurrentIndex(0)
        self._has_unsaved_changes = False
        self._refresh_preview()

    def _update_status(self, question_count: int) -> None:
        self.status_label.setText(f"{question_count} question(s) in this quiz.")

    def _refresh_preview(self) -> None:
        question_text = self.question_input.toPlainText()
        options = [field.text() for field in self.option_inputs]
        self.preview_view.setHtml(render_question(question_text, options, theme=self._theme))

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        self._refresh_preview()

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        for widget in (self.add_button, self.done_button, self.status_label, self.correct_option_combo):
            widget.setStyleSheet(style)
        for input_field in self.option_inputs:
            input_field.setStyleSheet(style)
