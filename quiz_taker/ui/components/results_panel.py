"""Component showing the score and missed questions of a finished quiz."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_taker.constants.ui_constants import (
    DEFAULT_QUIZ_FONT_SIZE,
    RESULTS_LIBRARY_BUTTON,
    RESULTS_PERFECT_MESSAGE,
    RESULTS_RETRY_BUTTON,
    RESULTS_SCORE_TEMPLATE,
)
from quiz_taker.core.quiz_manager import QuizManager
from quiz_taker.styling import Theme
from quiz_taker.styling.styles import Styles


class ResultsPanel(QWidget):
    """UI component for reviewing a completed attempt."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_retry: Callable[[], None],
        on_back_to_library: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_retry = on_retry
        self.on_back_to_library = on_back_to_library

        self._quiz_font_size: int = DEFAULT_QUIZ_FONT_SIZE
        self._theme = Theme.LIGHT

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel("", self)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.score_label = QLabel("", self)
        layout.addWidget(self.score_label)

        self.missed_heading = QLabel("Missed questions:", self)
        layout.addWidget(self.missed_heading)

        self.missed_list = QListWidget(self)
        self.missed_list.setWordWrap(True)
        self.missed_list.setAlternatingRowColors(True)
        layout.addWidget(self.missed_list, stretch=1)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.library_button = QPushButton(RESULTS_LIBRARY_BUTTON, self)
        self.library_button.clicked.connect(self._handle_back_to_library)
        button_row.addWidget(self.library_button)

        self.retry_button = QPushButton(RESULTS_RETRY_BUTTON, self)
        self.retry_button.clicked.connect(self._handle_retry)
        button_row.addWidget(self.retry_button)
        layout.addLayout(button_row)

    def show_results(self) -> None:
        snapshot = self.quiz_manager.get_snapshot()
        self.title_label.setText(snapshot.quiz_name or "")
        self.score_label.setText(
            RESULTS_SCORE_TEMPLATE.format(
                score=snapshot.score,
                total=snapshot.question_count,
                percentage=snapshot.percentage,
            )
        )

        self.missed_list.clear()
        for missed in snapshot.missed_answers:
            QListWidgetItem(
                f"{missed.question_text}\n"
                f"   Your answer: {missed.submitted_answer}\n"
                f"   Correct answer: {missed.correct_answer}",
                self.missed_list,
            )
        if not snapshot.missed_answers:
            self.missed_heading.setText(RESULTS_PERFECT_MESSAGE)
        else:
            self.missed_heading.setText(f"Missed questions ({len(snapshot.missed_answers)}):")
        self.missed_list.setVisible(bool(snapshot.missed_answers))

    def _handle_retry(self) -> None:
        self.quiz_manager.retry()
        self.on_retry()

    def _handle_back_to_library(self) -> None:
        self.quiz_manager.stop_session()
        self.on_back_to_library()

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        self.apply_font_size(self._quiz_font_size)

    def apply_font_size(self, font_size: int) -> None:
        self._quiz_font_size = font_size
        self.score_label.setStyleSheet(Styles.get_score_label_style(font_size, self._theme))
        self.missed_list.setStyleSheet(Styles.get_missed_answer_style(font_size, self._theme))
        style = f"font-size: {font_size}pt;"
        for widget in (self.missed_heading, self.retry_button, self.library_button):
            widget.setStyleSheet(style)
