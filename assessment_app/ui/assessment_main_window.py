"""Qt main window combining the category sidebar, dashboard and question form."""

from __future__ import annotations

from enum import Enum, auto
import logging

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from assessment_app.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from assessment_app.constants.ui_constants import (
    LOCKED_DIALOG_TITLE,
    MODE_BUTTON_ABOUT,
    MODE_BUTTON_DASHBOARD,
    MODE_BUTTON_HELP,
    MODE_BUTTON_RELOAD,
    MODE_BUTTON_SETTINGS,
    WINDOW_TITLE,
)
from assessment_app.core.assessment_manager import AssessmentManager
from assessment_app.core.models import CategoryCatalogue, QuestionSet, SubcategoryKey
from assessment_app.core.services.progress_engine import SubcategoryLockedError
from assessment_app.styling.styles import Styles
from assessment_app.ui.components.dashboard_panel import DashboardPanel
from assessment_app.ui.components.question_panel import QuestionPanel
from assessment_app.ui.components.sidebar_panel import SidebarPanel
from assessment_app.ui.dialog_helpers import (
    confirm_reset_subcategory,
    show_error,
    show_info,
    show_warning,
)
from assessment_app.ui.resource_fetcher import ResourceFetcher
from assessment_app.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class AssessmentMode(Enum):
    """What the main panel is currently showing."""

    DASHBOARD = auto()
    QUESTIONS = auto()


class AssessmentMainWindow(QMainWindow):
    """Main Qt window switching between the dashboard and a question form."""

    def __init__(self, assessment_manager: AssessmentManager, fetcher: ResourceFetcher) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(1100, 720)

        self.assessment_manager = assessment_manager
        self.fetcher = fetcher

        self._mode = AssessmentMode.DASHBOARD
        self._ui_font_size: int = 10
        self._question_font_size: int = 12

        self._build_ui()
        self._configure_advance_timer()
        self._connect_fetcher()
        self._apply_styles()
        self._reload_catalogue()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_mode_buttons(root_layout)

        body_layout = QHBoxLayout()
        self.sidebar_panel = SidebarPanel(
            self.assessment_manager,
            on_select_subcategory=self._open_subcategory,
            parent=self,
        )
        body_layout.addWidget(self.sidebar_panel)

        self.mode_stack = QStackedWidget(self)
        self.dashboard_panel = DashboardPanel(on_open_subcategory=self._open_subcategory, parent=self)
        self.question_panel = QuestionPanel(
            on_answer=self._handle_answer,
            on_reset=self._handle_reset,
            on_back=self._show_dashboard,
            parent=self,
        )
        self.mode_stack.addWidget(self.dashboard_panel)
        self.mode_stack.addWidget(self.question_panel)
        body_layout.addWidget(self.mode_stack, stretch=1)

        root_layout.addLayout(body_layout, stretch=1)

    def _build_mode_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.dashboard_button = QPushButton(MODE_BUTTON_DASHBOARD, self)
        self.dashboard_button.setCheckable(True)
        self.dashboard_button.clicked.connect(self._show_dashboard)
        button_row.addWidget(self.dashboard_button)

        self.reload_button = QPushButton(MODE_BUTTON_RELOAD, self)
        self.reload_button.clicked.connect(self._reload_catalogue)
        button_row.addWidget(self.reload_button)

        button_row.addStretch()

        self.about_button = QPushButton(MODE_BUTTON_ABOUT, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton(MODE_BUTTON_HELP, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton(MODE_BUTTON_SETTINGS, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    def _configure_advance_timer(self) -> None:
        self.advance_timer = QTimer(self)
        self.advance_timer.setSingleShot(True)
        self.advance_timer.timeout.connect(self._handle_auto_advance)

    def _connect_fetcher(self) -> None:
        self.fetcher.catalogue_loaded.connect(self._on_catalogue_loaded)
        self.fetcher.catalogue_failed.connect(self._on_catalogue_failed)
        self.fetcher.questions_loaded.connect(self._on_questions_loaded)
        self.fetcher.questions_failed.connect(self._on_questions_failed)

    def _set_mode(self, mode: AssessmentMode) -> None:
        self._mode = mode
        self.dashboard_button.setChecked(mode == AssessmentMode.DASHBOARD)
        index_map = {
            AssessmentMode.DASHBOARD: 0,
            AssessmentMode.QUESTIONS: 1,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])

    # --- Catalogue ---

    def _reload_catalogue(self) -> None:
        self._cancel_auto_advance()
        self.assessment_manager.return_to_dashboard()
        self.assessment_manager.begin_catalogue_load()
        self.reload_button.setEnabled(False)
        self._refresh_dashboard()
        self._set_mode(AssessmentMode.DASHBOARD)
        self.fetcher.fetch_catalogue()

    def _on_catalogue_loaded(self, catalogue: CategoryCatalogue) -> None:
        self.assessment_manager.finish_catalogue_load(catalogue)
        self.reload_button.setEnabled(True)
        self._refresh_dashboard()

    def _on_catalogue_failed(self, reason: str) -> None:
        self.assessment_manager.fail_catalogue_load(reason)
        self.reload_button.setEnabled(True)
        self._refresh_dashboard()

    # --- Navigation ---

    def _open_subcategory(self, key: SubcategoryKey) -> None:
        try:
            token = self.assessment_manager.select_subcategory(key.category, key.subcategory)
        except SubcategoryLockedError as exc:
            show_warning(self, LOCKED_DIALOG_TITLE, str(exc))
            self.sidebar_panel.highlight_active()
            return

        self.advance_timer.stop()
        self.question_panel.show_loading(key)
        self._set_mode(AssessmentMode.QUESTIONS)
        self.sidebar_panel.highlight_active()
        self.fetcher.fetch_questions(token, key.category, key.subcategory)

    def _show_dashboard(self) -> None:
        self._cancel_auto_advance()
        self.assessment_manager.return_to_dashboard()
        self._refresh_dashboard()
        self._set_mode(AssessmentMode.DASHBOARD)

    def _refresh_dashboard(self) -> None:
        self.dashboard_panel.update_summary(self.assessment_manager.dashboard_summary())
        self.sidebar_panel.refresh()

    # --- Questions ---

    def _on_questions_loaded(self, token: int, question_set: QuestionSet) -> None:
        if not self.assessment_manager.complete_question_request(token, question_set):
            return
        self._render_question_set(question_set)
        self.sidebar_panel.refresh()

    def _on_questions_failed(self, token: int, reason: str) -> None:
        if not self.assessment_manager.fail_question_request(token, reason):
            return
        self.question_panel.show_error(self.assessment_manager.get_question_error() or reason)

    def _render_question_set(self, question_set: QuestionSet) -> None:
        manager = self.assessment_manager
        category = manager.get_catalogue().get(question_set.category)
        legend = category.legend_for(question_set.subcategory) if category is not None else None
        answers = manager.get_answers(question_set.category, question_set.subcategory)

        self.question_panel.show_question_set(question_set, answers, legend)
        answered = sum(1 for index in answers if index < len(question_set))
        self.question_panel.update_progress(answered, len(question_set), manager.live_average())

    def _handle_answer(self, index: int, value: int) -> None:
        try:
            result = self.assessment_manager.set_answer(index, value)
        except (RuntimeError, ValueError) as exc:
            show_error(self, "Answer rejected", str(exc))
            return

        self.question_panel.update_progress(result.answered, result.total, result.live_average)
        if not result.completed_now:
            return

        pending = result.pending_transition
        self.question_panel.show_completed(has_next=pending is not None)
        self.sidebar_panel.refresh()
        if pending is not None:
            self.advance_timer.start(pending.delay_ms)

    def _handle_reset(self) -> None:
        manager = self.assessment_manager
        question_set = manager.get_active_question_set()
        if question_set is None:
            return
        if not confirm_reset_subcategory(self, question_set.subcategory):
            return

        self.advance_timer.stop()
        manager.reset_subcategory(question_set.category, question_set.subcategory)
        self._render_question_set(question_set)
        self.sidebar_panel.refresh()

    # --- Auto-advance ---

    def _handle_auto_advance(self) -> None:
        target = self.assessment_manager.consume_pending_transition()
        if target is None:
            return
        logger.info("Advancing to %s / %s", target.category, target.subcategory)
        self._open_subcategory(target)

    def _cancel_auto_advance(self) -> None:
        self.advance_timer.stop()
        self.assessment_manager.cancel_pending_transition()

    # --- Dialogs ---

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}\n\n"
            f"Resources: {self.fetcher.source.describe()}"
        )
        show_info(self, f"About {APP_NAME}", details, font_point_size=self._ui_font_size)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT, font_point_size=self._ui_font_size)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._ui_font_size,
            self._question_font_size,
            self.assessment_manager.get_auto_advance_delay(),
        )
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._question_font_size = dialog.get_question_font_size()
            self.assessment_manager.set_auto_advance_delay(dialog.get_auto_advance_delay_ms())
            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())

        ui_style = f"font-size: {self._ui_font_size}pt;"
        buttons = [
            self.dashboard_button,
            self.reload_button,
            self.about_button,
            self.help_button,
            self.settings_button,
        ]
        for button in buttons:
            button.setStyleSheet(ui_style)

        self.sidebar_panel.apply_font_size(self._ui_font_size)
        self.question_panel.apply_font_size(self._question_font_size)
