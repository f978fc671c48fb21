"""Component listing the quizzes in the catalog."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_taker.constants.ui_constants import (
    LIBRARY_CREATE_BUTTON,
    LIBRARY_EDIT_BUTTON,
    LIBRARY_EMPTY_STATE,
    LIBRARY_ROW_TEMPLATE,
    LIBRARY_TAKE_BUTTON,
    PLACEHOLDER_QUIZ_NAME,
)
from quiz_taker.core.errors import InvalidInputError
from quiz_taker.core.models import QuizId
from quiz_taker.core.quiz_manager import QuizManager
from quiz_taker.ui.dialog_helpers import show_warning

_QUIZ_ID_ROLE = Qt.UserRole
_QUESTION_COUNT_ROLE = Qt.UserRole + 1


class LibraryPanel(QWidget):
    """UI component for creating quizzes and picking one to edit or take."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_edit_quiz: Callable[[QuizId], None],
        on_take_quiz: Callable[[QuizId], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_edit_quiz = on_edit_quiz
        self.on_take_quiz = on_take_quiz

        self._build_ui()
        self.refresh_quizzes()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        create_row = QHBoxLayout()
        self.name_input = QLineEdit(self)
        self.name_input.setPlaceholderText(PLACEHOLDER_QUIZ_NAME)
        self.name_input.returnPressed.connect(self._handle_create_quiz)
        create_row.addWidget(self.name_input, stretch=1)

        self.create_button = QPushButton(LIBRARY_CREATE_BUTTON, self)
        self.create_button.clicked.connect(self._handle_create_quiz)
        create_row.addWidget(self.create_button)
        layout.addLayout(create_row)

        self.quiz_list = QListWidget(self)
        self.quiz_list.setAlternatingRowColors(True)
        self.quiz_list.currentItemChanged.connect(lambda *_: self._update_button_states())
        self.quiz_list.itemDoubleClicked.connect(lambda _: self._handle_take_quiz())
        layout.addWidget(self.quiz_list, stretch=1)

        self.empty_label = QLabel(LIBRARY_EMPTY_STATE, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.empty_label)

        action_row = QHBoxLayout()
        self.edit_button = QPushButton(LIBRARY_EDIT_BUTTON, self)
        self.edit_button.clicked.connect(self._handle_edit_quiz)
        action_row.addWidget(self.edit_button)

        self.take_button = QPushButton(LIBRARY_TAKE_BUTTON, self)
        self.take_button.clicked.connect(self._handle_take_quiz)
        action_row.addWidget(self.take_button)
        layout.addLayout(action_row)

    def refresh_quizzes(self, select_quiz_id: QuizId | None = None) -> None:
        """Rebuild the list from the catalog, keeping or changing the selection."""
        if select_quiz_id is None:
            select_quiz_id = self.selected_quiz_id()

        self.quiz_list.clear()
        for summary in self.quiz_manager.list_quizzes():
            item = QListWidgetItem(
                LIBRARY_ROW_TEMPLATE.format(name=summary.name, count=summary.question_count),
                self.quiz_list,
            )
            item.setData(_QUIZ_ID_ROLE, summary.quiz_id)
            item.setData(_QUESTION_COUNT_ROLE, summary.question_count)
            if summary.quiz_id == select_quiz_id:
                self.quiz_list.setCurrentItem(item)

        self.empty_label.setVisible(self.quiz_list.count() == 0)
        self._update_button_states()

    def selected_quiz_id(self) -> QuizId | None:
        item = self.quiz_list.currentItem()
        if item is None:
            return None
        return item.data(_QUIZ_ID_ROLE)

    def _update_button_states(self) -> None:
        item = self.quiz_list.currentItem()
        self.edit_button.setEnabled(item is not None)
        self.take_button.setEnabled(item is not None and item.data(_QUESTION_COUNT_ROLE) > 0)

    def _handle_create_quiz(self) -> None:
        name = self.name_input.text().strip()
        if not name:
            show_warning(self, "Missing name", "Enter a name for the new quiz.")
            return
        try:
            quiz_id = self.quiz_manager.create_quiz(name)
        except InvalidInputError as exc:
            show_warning(self, "Invalid quiz", str(exc))
            return
        self.name_input.clear()
        self.refresh_quizzes(select_quiz_id=quiz_id)
        self.on_edit_quiz(quiz_id)

    def _handle_edit_quiz(self) -> None:
        quiz_id = self.selected_quiz_id()
        if quiz_id is not None:
            self.on_edit_quiz(quiz_id)

    def _handle_take_quiz(self) -> None:
        quiz_id = self.selected_quiz_id()
        if quiz_id is not None and self.take_button.isEnabled():
            self.on_take_quiz(quiz_id)

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        for widget in (
            self.name_input,
            self.create_button,
            self.quiz_list,
            self.empty_label,
            self.edit_button,
            self.take_button,
        ):
            widget.setStyleSheet(style)
