"""Business logic for the assessment state shared by the UI widgets."""

from __future__ import annotations

import logging
from threading import Lock

from assessment_app.constants.assessment_constants import AUTO_ADVANCE_DELAY_MS
from assessment_app.core.config_loader import ConfigurationError, load_category_config
from assessment_app.core.models import (
    AnswerResult,
    CategoryCatalogue,
    DashboardSummary,
    PendingTransition,
    QuestionSet,
    SubcategoryKey,
)
from assessment_app.core.question_loader import load_question_set
from assessment_app.core.resource_source import ResourceFetchError, ResourceSource
from assessment_app.core.services.answer_store import AnswerStore
from assessment_app.core.services.local_store import LocalStore
from assessment_app.core.services.progress_engine import ProgressEngine
from assessment_app.core.services.score_aggregator import ScoreAggregator
from assessment_app.core.services.submitted_scores import SubmittedScoreRepository

logger = logging.getLogger(__name__)

CATALOGUE_ERROR_TEMPLATE = "Failed to load categories: {reason}"
QUESTIONS_ERROR_TEMPLATE = "Failed to load questions: {reason}"


class AssessmentManager:
    """Facade for the assessment services: answers, scores, progress and loaders."""

    def __init__(
        self,
        store: LocalStore,
        auto_advance_delay_ms: int = AUTO_ADVANCE_DELAY_MS,
    ) -> None:
        self._lock = Lock()

        # Services
        self._answers = AnswerStore(store)
        self._scores = SubmittedScoreRepository(store)
        self._progress = ProgressEngine(store, self._answers)
        self._aggregator = ScoreAggregator(self._answers, self._scores, self._progress)

        self._catalogue = CategoryCatalogue()
        self._loading: bool = False
        self._error_message: str | None = None

        self._active: SubcategoryKey | None = None
        self._active_question_set: QuestionSet | None = None
        self._question_error: str | None = None
        self._request_generation: int = 0
        self._submitted_this_visit: bool = False

        self._auto_advance_delay_ms = auto_advance_delay_ms
        self._pending: PendingTransition | None = None

    # --- Catalogue loading ---

    def begin_catalogue_load(self) -> None:
        with self._lock:
            self._loading = True
            self._error_message = None

    def finish_catalogue_load(self, catalogue: CategoryCatalogue) -> None:
        with self._lock:
            self._catalogue = catalogue
            self._progress.set_catalogue(catalogue)
            self._loading = False
            if self._active is not None and not self._progress.has_pair(self._active):
                self._clear_active()

    def fail_catalogue_load(self, reason: str) -> None:
        with self._lock:
            self._catalogue = CategoryCatalogue()
            self._progress.set_catalogue(self._catalogue)
            self._error_message = CATALOGUE_ERROR_TEMPLATE.format(reason=reason)
            self._loading = False
            self._clear_active()
        logger.error("Category configuration unavailable: %s", reason)

    def load_catalogue(self, source: ResourceSource) -> CategoryCatalogue:
        """Load the configuration synchronously; failures leave an empty catalogue."""
        self.begin_catalogue_load()
        try:
            catalogue = load_category_config(source)
        except (ResourceFetchError, ConfigurationError) as exc:
            self.fail_catalogue_load(str(exc))
            return CategoryCatalogue()
        self.finish_catalogue_load(catalogue)
        return catalogue

    def get_catalogue(self) -> CategoryCatalogue:
        with self._lock:
            return self._catalogue

    def is_loading(self) -> bool:
        with self._lock:
            return self._loading

    def get_error_message(self) -> str | None:
        with self._lock:
            return self._error_message

    # --- Selection and question loading ---

    def select_subcategory(self, category: str, subcategory: str) -> int:
        """Make the pair active and return the token for its question request.

        Raises ``SubcategoryLockedError`` and leaves the active selection
        untouched when the pair's prerequisites are not complete.
        """
        key = SubcategoryKey(category, subcategory)
        with self._lock:
            self._progress.ensure_unlocked(key)
            self._pending = None
            self._active = key
            self._active_question_set = None
            self._question_error = None
            self._submitted_this_visit = False
            self._request_generation += 1
            return self._request_generation

    def complete_question_request(self, token: int, question_set: QuestionSet) -> bool:
        """Install a loaded question set; returns False for superseded requests."""
        with self._lock:
            if token != self._request_generation or self._active != question_set.key:
                logger.debug("Discarding stale question set for %s", question_set.key)
                return False
            self._active_question_set = question_set
            self._question_error = None
            key = question_set.key
            self._progress.record_question_count(key, len(question_set))

            total = len(question_set)
            if total == 0:
                # Nothing to answer and nothing to score
                self._submitted_this_visit = True
                self._progress.mark_complete(key)
                return True

            answered = _count_within(self._answers.get_answers(*key), total)
            if answered >= total:
                # Revisiting a finished subcategory: no new submission this visit
                self._submitted_this_visit = True
                self._progress.mark_complete(key)
                if self._scores.get_score(*key) is None:
                    self._aggregator.submit(*key, total)
            return True

    def fail_question_request(self, token: int, reason: str) -> bool:
        with self._lock:
            if token != self._request_generation:
                return False
            self._active_question_set = None
            self._question_error = QUESTIONS_ERROR_TEMPLATE.format(reason=reason)
        logger.error("Question set unavailable: %s", reason)
        return True

    def load_active_questions(self, source: ResourceSource) -> QuestionSet | None:
        """Fetch questions for the active pair synchronously."""
        with self._lock:
            active = self._active
            token = self._request_generation
        if active is None:
            return None
        try:
            question_set = load_question_set(source, *active)
        except (ResourceFetchError, ConfigurationError) as exc:
            self.fail_question_request(token, str(exc))
            return None
        if not self.complete_question_request(token, question_set):
            return None
        return question_set

    def return_to_dashboard(self) -> None:
        with self._lock:
            self._clear_active()

    def get_active_pair(self) -> SubcategoryKey | None:
        with self._lock:
            return self._active

    def get_active_question_set(self) -> QuestionSet | None:
        with self._lock:
            return self._active_question_set

    def get_question_error(self) -> str | None:
        with self._lock:
            return self._question_error

    # --- Answers ---

    def set_answer(self, index: int, value: int) -> AnswerResult:
        with self._lock:
            question_set = self._active_question_set
            if question_set is None:
                raise RuntimeError("No subcategory is currently active.")
            if not 0 <= index < len(question_set):
                raise ValueError(f"Question index {index} out of range")
            question = question_set.questions[index]
            if value not in question.options:
                raise ValueError(
                    f"{value} is not a permitted answer; choose one of "
                    f"{', '.join(str(option) for option in question.options)}."
                )

            key = question_set.key
            self._answers.set_answer(key.category, key.subcategory, index, value)
            total = len(question_set)
            answered = _count_within(self._answers.get_answers(*key), total)
            live_average = self._aggregator.live_average(*key, total)

            completed_now = False
            submitted = None
            pending = None
            if answered >= total and not self._submitted_this_visit:
                self._submitted_this_visit = True
                submitted = self._aggregator.submit(*key, total)
                self._progress.mark_complete(key)
                completed_now = True
                pending = self._schedule_transition(key)

            return AnswerResult(
                key=key,
                answered=answered,
                total=total,
                live_average=live_average,
                completed_now=completed_now,
                submitted=submitted,
                pending_transition=pending,
            )

    def get_answers(self, category: str, subcategory: str) -> dict[int, int]:
        with self._lock:
            return self._answers.get_answers(category, subcategory)

    def reset_subcategory(self, category: str, subcategory: str) -> None:
        """Delete the pair's answers, its completion and its submitted score."""
        key = SubcategoryKey(category, subcategory)
        with self._lock:
            self._answers.reset_subcategory(category, subcategory)
            self._progress.mark_incomplete(key)
            self._aggregator.withdraw(category, subcategory)
            if self._active == key:
                self._submitted_this_visit = False
            if self._pending is not None and self._pending.source == key:
                self._pending = None
        logger.info("Reset answers for %s / %s", category, subcategory)

    def live_average(self) -> float | None:
        with self._lock:
            if self._active is None:
                return None
            total = None
            if self._active_question_set is not None:
                total = len(self._active_question_set)
            return self._aggregator.live_average(*self._active, total)

    # --- Progress ---

    def is_unlocked(self, category: str, subcategory: str) -> bool:
        with self._lock:
            return self._progress.is_unlocked(SubcategoryKey(category, subcategory))

    def is_complete(self, category: str, subcategory: str) -> bool:
        with self._lock:
            return self._progress.is_complete(SubcategoryKey(category, subcategory))

    def category_progress(self, category: str) -> float:
        with self._lock:
            return self._progress.category_progress(category)

    def get_submitted_score(self, category: str, subcategory: str) -> float | None:
        with self._lock:
            return self._aggregator.submitted_score(category, subcategory)

    def dashboard_summary(self) -> DashboardSummary:
        with self._lock:
            return self._aggregator.build_summary(self._catalogue)

    # --- Auto-advance ---

    def get_pending_transition(self) -> PendingTransition | None:
        with self._lock:
            return self._pending

    def cancel_pending_transition(self) -> None:
        with self._lock:
            self._pending = None

    def consume_pending_transition(self) -> SubcategoryKey | None:
        """Return the auto-advance target if it is still relevant, clearing it."""
        with self._lock:
            pending = self._pending
            self._pending = None
            if pending is None or self._active != pending.source:
                return None
            return pending.target

    def set_auto_advance_delay(self, delay_ms: int) -> None:
        with self._lock:
            self._auto_advance_delay_ms = max(0, delay_ms)

    def get_auto_advance_delay(self) -> int:
        with self._lock:
            return self._auto_advance_delay_ms

    def _schedule_transition(self, key: SubcategoryKey) -> PendingTransition | None:
        target = self._progress.next_pair(key)
        if target is None:
            self._pending = None
            return None
        self._pending = PendingTransition(
            source=key, target=target, delay_ms=self._auto_advance_delay_ms
        )
        return self._pending

    def _clear_active(self) -> None:
        self._active = None
        self._active_question_set = None
        self._question_error = None
        self._submitted_this_visit = False
        self._pending = None
        # Invalidate any request still in flight
        self._request_generation += 1


def _count_within(answers: dict[int, int], total: int) -> int:
    """Count answers whose index still exists in a question list of ``total``."""
    return sum(1 for index in answers if index < total)
