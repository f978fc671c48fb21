"""Component for answering the questions of the active quiz."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_taker.constants.quiz_constants import OPTION_COUNT
from quiz_taker.constants.ui_constants import (
    DEFAULT_QUIZ_FONT_SIZE,
    TAKING_BACK_BUTTON,
    TAKING_PROGRESS_TEMPLATE,
    TAKING_READY_TO_SUBMIT,
    TAKING_SUBMIT_BUTTON,
)
from quiz_taker.core.errors import InvalidStateError
from quiz_taker.core.models import SessionState
from quiz_taker.core.quiz_manager import QuizManager
from quiz_taker.styling import Theme
from quiz_taker.styling.styles import Styles
from quiz_taker.ui.dialog_helpers import confirm_abandon_attempt, show_error
from quiz_taker.ui.question_renderer import render_question


class TakingPanel(QWidget):
    """UI component that renders the session and forwards answers to it."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_finished: Callable[[], None],
        on_leave: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_finished = on_finished
        self.on_leave = on_leave

        self._quiz_font_size: int = DEFAULT_QUIZ_FONT_SIZE
        self._theme = Theme.LIGHT
        self._displayed_options: list[str] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.title_label = QLabel("", self)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.title_label, stretch=1)

        self.progress_label = QLabel("", self)
        self.progress_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        header_row.addWidget(self.progress_label)
        layout.addLayout(header_row)

        self.question_view = QWebEngineView(self)
        layout.addWidget(self.question_view, stretch=1)

        options_grid = QGridLayout()
        self.option_buttons: list[QPushButton] = []
        for idx in range(OPTION_COUNT):
            button = QPushButton("", self)
            button.clicked.connect(lambda _checked=False, i=idx: self._handle_option_clicked(i))
            options_grid.addWidget(button, idx // 2, idx % 2)
            self.option_buttons.append(button)
        layout.addLayout(options_grid)

        nav_row = QHBoxLayout()
        self.leave_button = QPushButton("Leave Quiz", self)
        self.leave_button.clicked.connect(self._handle_leave)
        nav_row.addWidget(self.leave_button)
        nav_row.addStretch()

        self.back_button = QPushButton(TAKING_BACK_BUTTON, self)
        self.back_button.clicked.connect(self._handle_back)
        nav_row.addWidget(self.back_button)

        self.submit_button = QPushButton(TAKING_SUBMIT_BUTTON, self)
        self.submit_button.clicked.connect(self._handle_submit)
        nav_row.addWidget(self.submit_button)
        layout.addLayout(nav_row)

    def refresh(self) -> None:
        """Re-render everything from the current session snapshot.

        Options are requested again on every render, so their order changes
        each time the question is shown.
        """
        snapshot = self.quiz_manager.get_snapshot()
        self.title_label.setText(snapshot.quiz_name or "")
        in_progress = snapshot.state is SessionState.IN_PROGRESS

        if in_progress and snapshot.current_question is not None:
            self.progress_label.setText(
                TAKING_PROGRESS_TEMPLATE.format(
                    number=snapshot.current_question_index + 1,
                    total=snapshot.question_count,
                )
            )
            self.question_view.setHtml(
                render_question(
                    snapshot.current_question.text,
                    font_size=self._quiz_font_size,
                    theme=self._theme,
                )
            )
            self._displayed_options = self.quiz_manager.present_options()
        else:
            self.progress_label.setText(TAKING_READY_TO_SUBMIT)
            self.question_view.setHtml(
                render_question(TAKING_READY_TO_SUBMIT, font_size=self._quiz_font_size, theme=self._theme)
            )
            self._displayed_options = []

        for idx, button in enumerate(self.option_buttons):
            if idx < len(self._displayed_options):
                # '&' would otherwise be consumed as a mnemonic marker.
                button.setText(self._displayed_options[idx].replace("&", "&&"))
                button.setVisible(True)
            else:
                button.setVisible(False)

        self.back_button.setEnabled(snapshot.can_go_back)
        self.submit_button.setVisible(snapshot.awaiting_submit)

    def _handle_option_clicked(self, index: int) -> None:
        if not 0 <= index < len(self._displayed_options):
            return
        try:
            self.quiz_manager.submit_answer(self._displayed_options[index])
        except InvalidStateError as exc:
            show_error(self, "Answer rejected", str(exc))
        self.refresh()

    def _handle_back(self) -> None:
        self.quiz_manager.go_back()
        self.refresh()

    def _handle_submit(self) -> None:
        try:
            self.quiz_manager.finalize()
        except InvalidStateError as exc:
            show_error(self, "Submit failed", str(exc))
            self.refresh()
            return
        self.on_finished()

    def _handle_leave(self) -> None:
        if not confirm_abandon_attempt(self):
            return
        self.quiz_manager.stop_session()
        self.on_leave()

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        self.apply_font_size(self._quiz_font_size)

    def apply_font_size(self, font_size: int) -> None:
        self._quiz_font_size = font_size
        option_style = Styles.get_option_button_style(font_size, self._theme)
        for button in self.option_buttons:
            button.setStyleSheet(option_style)

        label_style = f"font-size: {font_size}pt;"
        for widget in (self.progress_label, self.back_button, self.submit_button, self.leave_button):
            widget.setStyleSheet(label_style)
