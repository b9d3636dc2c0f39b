"""Component showing the active subcategory's question form."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QButtonGroup,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QRadioButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from assessment_app.constants.ui_constants import (
    ANSWERED_TEMPLATE,
    BACK_TO_DASHBOARD,
    COMPLETED_BANNER,
    COMPLETED_LAST_BANNER,
    DEFINITION_HEADING,
    LEGEND_HEADING,
    LIVE_AVERAGE_EMPTY,
    LIVE_AVERAGE_TEMPLATE,
    QUESTIONS_EMPTY,
    QUESTIONS_LOADING,
    RESET_SUBCATEGORY_BUTTON,
)
from assessment_app.core.markdown_renderer import renderer
from assessment_app.core.models import QuestionSet, SubcategoryKey
from assessment_app.core.score_math import round_score
from assessment_app.styling.styles import Styles


class QuestionPanel(QWidget):
    """UI component listing the Likert statements of one subcategory."""

    def __init__(
        self,
        on_answer: callable,
        on_reset: callable,
        on_back: callable,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_answer = on_answer
        self.on_reset = on_reset
        self.on_back = on_back

        self._question_font_size: int = 12
        self._button_groups: list[QButtonGroup] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.title_label = QLabel("", self)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        self.title_label.setTextFormat(Qt.PlainText)
        self.title_label.setWordWrap(True)
        header_row.addWidget(self.title_label, stretch=1)

        self.back_button = QPushButton(BACK_TO_DASHBOARD, self)
        self.back_button.clicked.connect(lambda: self.on_back())
        header_row.addWidget(self.back_button)
        layout.addLayout(header_row)

        self.definition_group = QGroupBox(DEFINITION_HEADING, self)
        definition_layout = QVBoxLayout()
        self.definition_group.setLayout(definition_layout)
        self.definition_label = QLabel("", self.definition_group)
        self.definition_label.setTextFormat(Qt.RichText)
        self.definition_label.setWordWrap(True)
        definition_layout.addWidget(self.definition_label)
        layout.addWidget(self.definition_group)

        self.legend_group = QGroupBox(LEGEND_HEADING, self)
        legend_layout = QVBoxLayout()
        self.legend_group.setLayout(legend_layout)
        self.legend_label = QLabel("", self.legend_group)
        self.legend_label.setTextFormat(Qt.RichText)
        self.legend_label.setWordWrap(True)
        legend_layout.addWidget(self.legend_label)
        layout.addWidget(self.legend_group)

        self.status_label = QLabel(QUESTIONS_LOADING, self)
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

        self.scroll_area = QScrollArea(self)
        self.scroll_area.setWidgetResizable(True)
        layout.addWidget(self.scroll_area, stretch=1)

        self.completed_label = QLabel("", self)
        self.completed_label.setAlignment(Qt.AlignCenter)
        self.completed_label.setStyleSheet(Styles.get_priority_style("medium"))
        self.completed_label.setVisible(False)
        layout.addWidget(self.completed_label)

        footer_row = QHBoxLayout()
        self.answered_label = QLabel("", self)
        footer_row.addWidget(self.answered_label)
        footer_row.addStretch()
        self.average_label = QLabel(LIVE_AVERAGE_EMPTY, self)
        footer_row.addWidget(self.average_label)
        footer_row.addStretch()
        self.reset_button = QPushButton(RESET_SUBCATEGORY_BUTTON, self)
        self.reset_button.clicked.connect(lambda: self.on_reset())
        footer_row.addWidget(self.reset_button)
        layout.addLayout(footer_row)

        self.clear()

    # --- State transitions ---

    def clear(self) -> None:
        """Drop the previous form so stale questions are never shown."""
        self._button_groups = []
        self.scroll_area.setWidget(QWidget())
        self.definition_group.setVisible(False)
        self.legend_group.setVisible(False)
        self.completed_label.setVisible(False)
        self.answered_label.setText("")
        self.average_label.setText(LIVE_AVERAGE_EMPTY)
        self.reset_button.setEnabled(False)

    def show_loading(self, key: SubcategoryKey) -> None:
        self.clear()
        self.title_label.setText(f"{key.category} / {key.subcategory}")
        self._show_status(QUESTIONS_LOADING)

    def show_error(self, message: str) -> None:
        self.clear()
        self._show_status(message)

    def show_question_set(
        self,
        question_set: QuestionSet,
        answers: dict[int, int],
        legend: str | None = None,
    ) -> None:
        self.clear()
        self.title_label.setText(f"{question_set.category} / {question_set.subcategory}")

        definition_html = renderer.render_fragment(question_set.definition)
        self.definition_label.setText(definition_html)
        self.definition_group.setVisible(bool(definition_html))

        legend_html = renderer.render_legend(legend)
        self.legend_label.setText(legend_html)
        self.legend_group.setVisible(bool(legend_html))

        if not question_set.questions:
            self._show_status(QUESTIONS_EMPTY)
            return
        self.status_label.setVisible(False)

        container = QWidget()
        container_layout = QVBoxLayout()
        container.setLayout(container_layout)
        for question in question_set.questions:
            container_layout.addWidget(self._build_question_box(question, answers.get(question.index)))
        container_layout.addStretch()
        self.scroll_area.setWidget(container)
        self.reset_button.setEnabled(True)

    def update_progress(self, answered: int, total: int, live_average: float | None) -> None:
        self.answered_label.setText(ANSWERED_TEMPLATE.format(answered=answered, total=total))
        if live_average is None:
            self.average_label.setText(LIVE_AVERAGE_EMPTY)
        else:
            self.average_label.setText(
                LIVE_AVERAGE_TEMPLATE.format(average=f"{round_score(live_average):.1f}")
            )

    def show_completed(self, has_next: bool) -> None:
        self.completed_label.setText(COMPLETED_BANNER if has_next else COMPLETED_LAST_BANNER)
        self.completed_label.setVisible(True)

    def apply_font_size(self, font_size: int) -> None:
        self._question_font_size = font_size
        self.scroll_area.setStyleSheet(f"font-size: {font_size}pt;")
        self.definition_label.setStyleSheet(f"font-size: {font_size}pt;")
        self.legend_label.setStyleSheet(f"font-size: {font_size}pt;")

    # --- Helpers ---

    def _build_question_box(self, question, selected: int | None) -> QGroupBox:
        box = QGroupBox(f"Question {question.index + 1}")
        box_layout = QVBoxLayout()
        box.setLayout(box_layout)

        text_label = QLabel(question.text, box)
        text_label.setTextFormat(Qt.PlainText)
        text_label.setWordWrap(True)
        box_layout.addWidget(text_label)

        options_row = QHBoxLayout()
        group = QButtonGroup(box)
        group.setExclusive(True)
        for value in question.options:
            radio = QRadioButton(str(value), box)
            radio.setChecked(value == selected)
            radio.clicked.connect(
                lambda _checked=False, index=question.index, chosen=value: self.on_answer(index, chosen)
            )
            group.addButton(radio)
            options_row.addWidget(radio)
        options_row.addStretch()
        box_layout.addLayout(options_row)

        self._button_groups.append(group)
        return box

    def _show_status(self, message: str) -> None:
        self.status_label.setText(message)
        self.status_label.setVisible(True)
