"""Service turning answers into subcategory, category and overall scores."""

from __future__ import annotations

import logging

from assessment_app.constants.assessment_constants import (
    HIGH_PRIORITY_THRESHOLD,
    MAX_RECOMMENDED_ACTIONS,
    MEDIUM_PRIORITY_THRESHOLD,
    MIN_RECOMMENDED_ACTIONS,
)
from assessment_app.core.models import (
    CategoryCatalogue,
    CategoryScoreRow,
    CompletionStats,
    DashboardSummary,
    RecommendedAction,
    SubcategoryKey,
    SubmittedScore,
)
from assessment_app.core.score_math import mean, round_score, score_grade, score_tier
from assessment_app.core.services.answer_store import AnswerStore
from assessment_app.core.services.progress_engine import ProgressEngine
from assessment_app.core.services.submitted_scores import SubmittedScoreRepository

logger = logging.getLogger(__name__)


class ScoreAggregator:
    """Computes live averages, submits completed scores and builds the dashboard.

    Aggregates are unweighted means of the submitted scores that exist.
    Subcategories and categories without a submitted score are left out of
    every mean rather than counted as zero.
    """

    def __init__(
        self,
        answer_store: AnswerStore,
        submitted_scores: SubmittedScoreRepository,
        progress: ProgressEngine,
    ) -> None:
        self._answers = answer_store
        self._scores = submitted_scores
        self._progress = progress

    def live_average(
        self, category: str, subcategory: str, total: int | None = None
    ) -> float | None:
        """Mean of the answers given so far, not of the full question count.

        When ``total`` is given, answers to indices beyond it are ignored.
        """
        answers = self._answers.get_answers(category, subcategory)
        return mean(
            value for index, value in answers.items() if total is None or index < total
        )

    def submit(
        self, category: str, subcategory: str, total: int | None = None
    ) -> SubmittedScore | None:
        average = self.live_average(category, subcategory, total)
        if average is None:
            return None
        entry = self._scores.upsert(category, subcategory, average)
        logger.info(
            "Submitted score %.1f for %s / %s", entry.average_score, category, subcategory
        )
        return entry

    def withdraw(self, category: str, subcategory: str) -> None:
        self._scores.remove(category, subcategory)

    def submitted_score(self, category: str, subcategory: str) -> float | None:
        return self._scores.get_score(category, subcategory)

    def category_scores(self, catalogue: CategoryCatalogue) -> dict[str, float]:
        """Mean submitted score per category, for categories that have one."""
        by_pair = self._scores_by_pair()
        result: dict[str, float] = {}
        for category in catalogue:
            values = [
                by_pair[key].average_score
                for key in (SubcategoryKey(category.name, sub) for sub in category.subcategories)
                if key in by_pair
            ]
            category_mean = mean(values)
            if category_mean is not None:
                result[category.name] = category_mean
        return result

    def overall_score(self, catalogue: CategoryCatalogue) -> float | None:
        return mean(self.category_scores(catalogue).values())

    def recommended_actions(self, catalogue: CategoryCatalogue) -> list[RecommendedAction]:
        by_pair = self._scores_by_pair()
        pairs = catalogue.flattened_pairs()
        actions: list[RecommendedAction] = []
        for key in pairs:
            entry = by_pair.get(key)
            if entry is None or entry.average_score >= MEDIUM_PRIORITY_THRESHOLD:
                continue
            priority = "high" if entry.average_score < HIGH_PRIORITY_THRESHOLD else "medium"
            actions.append(
                RecommendedAction(
                    title=f"Improve {key.subcategory} in {key.category}",
                    description=f"Current score is {entry.average_score:.1f}/5.",
                    priority=priority,
                    category=key.category,
                    subcategory=key.subcategory,
                )
            )

        if len(actions) < MIN_RECOMMENDED_ACTIONS:
            if not any(key in by_pair for key in pairs):
                actions.append(
                    RecommendedAction(
                        title="Start your assessment",
                        description="Complete assessments for at least one subcategory to see recommendations.",
                        priority="medium",
                    )
                )
            else:
                actions.append(
                    RecommendedAction(
                        title="Continue your assessment",
                        description="Complete assessments for more subcategories to get better insights.",
                        priority="medium",
                    )
                )

        # sorted() is stable, so equal priorities keep catalogue order
        actions = sorted(actions, key=lambda action: action.priority != "high")
        return actions[:MAX_RECOMMENDED_ACTIONS]

    def completion_stats(self) -> CompletionStats:
        total = self._progress.total_count()
        completed = self._progress.completed_count()
        percentage = round(completed / total * 100) if total else 0
        return CompletionStats(completed=completed, total=total, percentage=percentage)

    def build_summary(self, catalogue: CategoryCatalogue) -> DashboardSummary:
        category_scores = self.category_scores(catalogue)
        overall = mean(category_scores.values())

        rows = []
        for category in catalogue:
            score = category_scores.get(category.name)
            rows.append(
                CategoryScoreRow(
                    name=category.name,
                    icon=category.icon,
                    score=round_score(score) if score is not None else None,
                    progress_percentage=self._progress.category_progress(category.name),
                    tier=score_tier(score) if score is not None else None,
                    grade=score_grade(score) if score is not None else None,
                )
            )

        by_pair = self._scores_by_pair()
        pairs = catalogue.flattened_pairs()
        weakest = sorted(
            (by_pair[key] for key in pairs if key in by_pair),
            key=lambda entry: entry.average_score,
        )

        return DashboardSummary(
            overall_score=round_score(overall) if overall is not None else None,
            overall_grade=score_grade(overall) if overall is not None else None,
            overall_tier=score_tier(overall) if overall is not None else None,
            completion=self.completion_stats(),
            category_rows=tuple(rows),
            recommended_actions=tuple(self.recommended_actions(catalogue)),
            weakest_subcategories=tuple(weakest),
        )

    def _scores_by_pair(self) -> dict[SubcategoryKey, SubmittedScore]:
        return {entry.key: entry for entry in self._scores.get_scores()}
