"""Settings dialog for configuring AssessQt preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QSpinBox,
    QPushButton,
    QGroupBox,
)

MAX_AUTO_ADVANCE_DELAY_MS = 10_000


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(
        self,
        parent=None,
        ui_font_size: int = 10,
        question_font_size: int = 12,
        auto_advance_delay_ms: int = 1200,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._ui_font_size = ui_font_size
        self._question_font_size = question_font_size
        self._auto_advance_delay_ms = max(0, min(MAX_AUTO_ADVANCE_DELAY_MS, auto_advance_delay_ms))

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        font_group = QGroupBox("Font Sizes")
        font_layout = QVBoxLayout()
        font_group.setLayout(font_layout)

        ui_font_row = QHBoxLayout()
        ui_font_label = QLabel("UI Font Size (buttons, sidebar):")
        ui_font_label.setToolTip("Font size for buttons, the category sidebar, and controls")
        self.ui_font_spinbox = QSpinBox()
        self.ui_font_spinbox.setRange(8, 24)
        self.ui_font_spinbox.setValue(self._ui_font_size)
        self.ui_font_spinbox.setSuffix(" pt")
        ui_font_row.addWidget(ui_font_label)
        ui_font_row.addStretch()
        ui_font_row.addWidget(self.ui_font_spinbox)
        font_layout.addLayout(ui_font_row)

        question_font_row = QHBoxLayout()
        question_font_label = QLabel("Question Font Size (statements, answers):")
        self.question_font_spinbox = QSpinBox()
        self.question_font_spinbox.setRange(10, 32)
        self.question_font_spinbox.setValue(self._question_font_size)
        self.question_font_spinbox.setSuffix(" pt")
        question_font_row.addWidget(question_font_label)
        question_font_row.addStretch()
        question_font_row.addWidget(self.question_font_spinbox)
        font_layout.addLayout(question_font_row)

        layout.addWidget(font_group)

        flow_group = QGroupBox("Assessment Flow")
        flow_layout = QVBoxLayout()
        flow_group.setLayout(flow_layout)

        delay_row = QHBoxLayout()
        delay_label = QLabel("Auto-advance delay after completing a subcategory:")
        delay_label.setToolTip("Set to 0 to move to the next subcategory immediately.")
        self.delay_spinbox = QSpinBox()
        self.delay_spinbox.setRange(0, MAX_AUTO_ADVANCE_DELAY_MS)
        self.delay_spinbox.setSingleStep(100)
        self.delay_spinbox.setValue(self._auto_advance_delay_ms)
        self.delay_spinbox.setSuffix(" ms")
        delay_row.addWidget(delay_label)
        delay_row.addStretch()
        delay_row.addWidget(self.delay_spinbox)
        flow_layout.addLayout(delay_row)

        layout.addWidget(flow_group)

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

    def get_question_font_size(self) -> int:
        return self.question_font_spinbox.value()

    def get_auto_advance_delay_ms(self) -> int:
        """Get the pause before moving to the next subcategory."""
        return self.delay_spinbox.value()
