"""Settings dialog for configuring QuizTaker preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from quiz_taker.constants.ui_constants import DEFAULT_QUIZ_FONT_SIZE, DEFAULT_UI_FONT_SIZE
from quiz_taker.styling import Theme


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(
        self,
        parent=None,
        ui_font_size: int = DEFAULT_UI_FONT_SIZE,
        quiz_font_size: int = DEFAULT_QUIZ_FONT_SIZE,
        theme: Theme = Theme.LIGHT,
        shuffle_seed: int | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._ui_font_size = ui_font_size
        self._quiz_font_size = quiz_font_size
        self._theme = theme
        self._shuffle_seed = shuffle_seed

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Font settings group
        font_group = QGroupBox("Font Sizes")
        font_layout = QVBoxLayout()
        font_group.setLayout(font_layout)

        ui_font_row = QHBoxLayout()
        ui_font_label = QLabel("UI Font Size (buttons, lists):")
        self.ui_font_spinbox = QSpinBox()
        self.ui_font_spinbox.setRange(8, 24)
        self.ui_font_spinbox.setValue(self._ui_font_size)
        self.ui_font_spinbox.setSuffix(" pt")
        ui_font_row.addWidget(ui_font_label)
        ui_font_row.addStretch()
        ui_font_row.addWidget(self.ui_font_spinbox)
        font_layout.addLayout(ui_font_row)

        quiz_font_row = QHBoxLayout()
        quiz_font_label = QLabel("Quiz Font Size (questions, answers):")
        quiz_font_label.setToolTip("Font size used while taking a quiz and on the results page")
        self.quiz_font_spinbox = QSpinBox()
        self.quiz_font_spinbox.setRange(10, 32)
        self.quiz_font_spinbox.setValue(self._quiz_font_size)
        self.quiz_font_spinbox.setSuffix(" pt")
        quiz_font_row.addWidget(quiz_font_label)
        quiz_font_row.addStretch()
        quiz_font_row.addWidget(self.quiz_font_spinbox)
        font_layout.addLayout(quiz_font_row)

        layout.addWidget(font_group)

        # Display settings group
        display_group = QGroupBox("Display Settings")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        theme_row = QHBoxLayout()
        theme_row.addWidget(QLabel("Theme:"))
        theme_row.addStretch()
        self.theme_combo = QComboBox()
        for theme in Theme:
            self.theme_combo.addItem(theme.name.title(), userData=theme)
        self.theme_combo.setCurrentIndex(list(Theme).index(self._theme))
        theme_row.addWidget(self.theme_combo)
        display_layout.addLayout(theme_row)

        self.fixed_seed_checkbox = QCheckBox("Use a fixed shuffle seed for answer order")
        self.fixed_seed_checkbox.setToolTip(
            "When enabled, the sequence of shuffled answer orders is reproducible between runs."
        )
        self.fixed_seed_checkbox.setChecked(self._shuffle_seed is not None)
        display_layout.addWidget(self.fixed_seed_checkbox)

        seed_row = QHBoxLayout()
        seed_row.addWidget(QLabel("Shuffle seed:"))
        seed_row.addStretch()
        self.seed_spinbox = QSpinBox()
        self.seed_spinbox.setRange(0, 999_999)
        self.seed_spinbox.setValue(self._shuffle_seed or 0)
        self.seed_spinbox.setEnabled(self._shuffle_seed is not None)
        self.fixed_seed_checkbox.toggled.connect(self.seed_spinbox.setEnabled)
        seed_row.addWidget(self.seed_spinbox)
        display_layout.addLayout(seed_row)

        layout.addWidget(display_group)

        # Buttons
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_ui_font_size(self) -> int:
        return self.ui_font_spinbox.value()

    def get_quiz_font_size(self) -> int:
        return self.quiz_font_spinbox.value()

    def get_theme(self) -> Theme:
        return self.theme_combo.currentData()

    def get_shuffle_seed(self) -> int | None:
        """Get the fixed shuffle seed, or None for a fresh random order."""
        if not self.fixed_seed_checkbox.isChecked():
            return None
        return self.seed_spinbox.value()
