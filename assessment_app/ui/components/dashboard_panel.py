"""Component for the score overview and recommended actions."""

from __future__ import annotations

import html

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLayout,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from assessment_app.constants.assessment_constants import MAX_SCORE
from assessment_app.constants.ui_constants import (
    DASHBOARD_ACTIONS_HEADING,
    DASHBOARD_CATEGORY_HEADING,
    DASHBOARD_COMPLETION_TEMPLATE,
    DASHBOARD_NO_SCORE,
    DASHBOARD_TITLE,
    DASHBOARD_VIEW_ASSESSMENT,
    DASHBOARD_WEAKEST_HEADING,
    DASHBOARD_WEAKEST_LIMIT,
)
from assessment_app.core.models import DashboardSummary, RecommendedAction, SubmittedScore
from assessment_app.core.score_math import score_percentage
from assessment_app.styling.styles import Styles


def _format_score(score: float | None) -> str:
    if score is None:
        return DASHBOARD_NO_SCORE
    return f"{score:.1f}"


def _clear_layout(layout: QLayout) -> None:
    while layout.count():
        item = layout.takeAt(0)
        widget = item.widget()
        if widget is not None:
            widget.deleteLater()
        elif item.layout() is not None:
            _clear_layout(item.layout())


class DashboardPanel(QWidget):
    """UI component rendering a ``DashboardSummary``."""

    def __init__(self, on_open_subcategory: callable, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_open_subcategory = on_open_subcategory
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        overall_group = QGroupBox(DASHBOARD_TITLE, self)
        overall_layout = QHBoxLayout()
        overall_group.setLayout(overall_layout)
        self.overall_score_label = QLabel(DASHBOARD_NO_SCORE, overall_group)
        self.overall_score_label.setStyleSheet(Styles.get_score_label_style(None))
        overall_layout.addWidget(self.overall_score_label)
        self.overall_grade_label = QLabel("", overall_group)
        self.overall_grade_label.setStyleSheet(Styles.get_large_label_style())
        overall_layout.addWidget(self.overall_grade_label)
        self.overall_bar = QProgressBar(overall_group)
        self.overall_bar.setRange(0, 100)
        self.overall_bar.setTextVisible(False)
        self.overall_bar.setMaximumWidth(220)
        overall_layout.addWidget(self.overall_bar)
        overall_layout.addStretch()
        self.completion_label = QLabel("", overall_group)
        overall_layout.addWidget(self.completion_label)
        layout.addWidget(overall_group)

        self.category_group = QGroupBox(DASHBOARD_CATEGORY_HEADING, self)
        self.category_layout = QGridLayout()
        self.category_group.setLayout(self.category_layout)
        layout.addWidget(self.category_group)

        self.actions_group = QGroupBox(DASHBOARD_ACTIONS_HEADING, self)
        self.actions_layout = QVBoxLayout()
        self.actions_group.setLayout(self.actions_layout)
        layout.addWidget(self.actions_group)

        self.weakest_group = QGroupBox(DASHBOARD_WEAKEST_HEADING, self)
        self.weakest_layout = QVBoxLayout()
        self.weakest_group.setLayout(self.weakest_layout)
        layout.addWidget(self.weakest_group)

        layout.addStretch()

    def update_summary(self, summary: DashboardSummary) -> None:
        if summary.overall_score is None:
            self.overall_score_label.setText(DASHBOARD_NO_SCORE)
            self.overall_grade_label.setText("")
            self.overall_bar.setValue(0)
        else:
            self.overall_score_label.setText(f"{summary.overall_score:.1f} / {MAX_SCORE:.0f}")
            self.overall_grade_label.setText(summary.overall_grade or "")
            self.overall_bar.setValue(int(round(score_percentage(summary.overall_score))))
        self.overall_score_label.setStyleSheet(Styles.get_score_label_style(summary.overall_tier))

        completion = summary.completion
        self.completion_label.setText(
            DASHBOARD_COMPLETION_TEMPLATE.format(
                completed=completion.completed,
                total=completion.total,
                percentage=completion.percentage,
            )
        )

        self._populate_categories(summary)
        self._populate_actions(summary.recommended_actions)
        self._populate_weakest(summary.weakest_subcategories)

    def _populate_categories(self, summary: DashboardSummary) -> None:
        _clear_layout(self.category_layout)
        for row_index, row in enumerate(summary.category_rows):
            name_label = QLabel(row.name, self.category_group)
            name_label.setToolTip(row.icon)
            self.category_layout.addWidget(name_label, row_index, 0)

            score_label = QLabel(_format_score(row.score), self.category_group)
            score_label.setStyleSheet(f"color: {Styles.get_tier_color(row.tier)}; font-weight: bold;")
            self.category_layout.addWidget(score_label, row_index, 1)

            grade_label = QLabel(row.grade or "", self.category_group)
            self.category_layout.addWidget(grade_label, row_index, 2)

            bar = QProgressBar(self.category_group)
            bar.setRange(0, 100)
            bar.setValue(int(round(row.progress_percentage)))
            bar.setFormat("%p% complete")
            self.category_layout.addWidget(bar, row_index, 3)
        self.category_layout.setColumnStretch(3, 1)

    def _populate_actions(self, actions: tuple[RecommendedAction, ...]) -> None:
        _clear_layout(self.actions_layout)
        for action in actions:
            row = QHBoxLayout()

            priority_label = QLabel(action.priority.upper(), self.actions_group)
            priority_label.setStyleSheet(Styles.get_priority_style(action.priority))
            priority_label.setMinimumWidth(70)
            row.addWidget(priority_label)

            text_label = QLabel(
                f"<b>{html.escape(action.title)}</b><br>{html.escape(action.description)}",
                self.actions_group,
            )
            text_label.setTextFormat(Qt.RichText)
            text_label.setWordWrap(True)
            row.addWidget(text_label, stretch=1)

            key = action.key
            if key is not None:
                open_button = QPushButton(DASHBOARD_VIEW_ASSESSMENT, self.actions_group)
                open_button.clicked.connect(lambda _checked=False, target=key: self.on_open_subcategory(target))
                row.addWidget(open_button)

            self.actions_layout.addLayout(row)

    def _populate_weakest(self, weakest: tuple[SubmittedScore, ...]) -> None:
        _clear_layout(self.weakest_layout)
        shown = weakest[:DASHBOARD_WEAKEST_LIMIT]
        self.weakest_group.setVisible(bool(shown))
        for entry in shown:
            label = QLabel(
                f"{entry.category} / {entry.subcategory}: {entry.average_score:.1f}",
                self.weakest_group,
            )
            label.setTextFormat(Qt.PlainText)
            self.weakest_layout.addWidget(label)
