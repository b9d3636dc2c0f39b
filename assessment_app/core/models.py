"""Domain models for the assessment application."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import NamedTuple


class SubcategoryKey(NamedTuple):
    """Identifies one unit of assessment in the flattened order."""

    category: str
    subcategory: str


@dataclass(frozen=True, slots=True)
class Category:
    """Top-level grouping with an icon and ordered subcategories."""

    name: str
    icon: str
    subcategories: tuple[str, ...] = ()
    legends: dict[str, str] = field(default_factory=dict)

    def legend_for(self, subcategory: str) -> str | None:
        return self.legends.get(subcategory)


@dataclass(frozen=True, slots=True)
class CategoryCatalogue:
    """Ordered category map built from the configuration resource."""

    categories: tuple[Category, ...] = ()

    def __len__(self) -> int:
        return len(self.categories)

    def __iter__(self):
        return iter(self.categories)

    def is_empty(self) -> bool:
        return not self.categories

    def names(self) -> list[str]:
        return [category.name for category in self.categories]

    def get(self, name: str) -> Category | None:
        return next((c for c in self.categories if c.name == name), None)

    def flattened_pairs(self) -> list[SubcategoryKey]:
        """Return every (category, subcategory) pair in gating order."""
        return [
            SubcategoryKey(category.name, subcategory)
            for category in self.categories
            for subcategory in category.subcategories
        ]


@dataclass(frozen=True, slots=True)
class Question:
    """Likert-style statement with the integer values it accepts."""

    index: int
    text: str
    options: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class QuestionSet:
    """Questions and optional definition for a single subcategory."""

    category: str
    subcategory: str
    questions: tuple[Question, ...] = ()
    definition: str | None = None

    @property
    def key(self) -> SubcategoryKey:
        return SubcategoryKey(self.category, self.subcategory)

    def __len__(self) -> int:
        return len(self.questions)


@dataclass(slots=True)
class SubmittedScore:
    """Durable average score for a completed subcategory."""

    category: str
    subcategory: str
    average_score: float
    submitted_at: datetime | None = None

    @property
    def key(self) -> SubcategoryKey:
        return SubcategoryKey(self.category, self.subcategory)


@dataclass(frozen=True, slots=True)
class PendingTransition:
    """Auto-advance target waiting for its delay to elapse."""

    source: SubcategoryKey
    target: SubcategoryKey
    delay_ms: int


@dataclass(frozen=True, slots=True)
class AnswerResult:
    """Outcome of recording one answer on the active subcategory."""

    key: SubcategoryKey
    answered: int
    total: int
    live_average: float | None
    completed_now: bool = False
    submitted: SubmittedScore | None = None
    pending_transition: PendingTransition | None = None

    @property
    def is_complete(self) -> bool:
        return self.total > 0 and self.answered >= self.total


@dataclass(frozen=True, slots=True)
class RecommendedAction:
    """Threshold-derived suggestion shown on the dashboard."""

    title: str
    description: str
    priority: str
    category: str | None = None
    subcategory: str | None = None

    @property
    def key(self) -> SubcategoryKey | None:
        if self.category is None or self.subcategory is None:
            return None
        return SubcategoryKey(self.category, self.subcategory)


@dataclass(frozen=True, slots=True)
class CompletionStats:
    completed: int
    total: int
    percentage: int


@dataclass(frozen=True, slots=True)
class CategoryScoreRow:
    """Immutable snapshot of one category on the dashboard."""

    name: str
    icon: str
    score: float | None
    progress_percentage: float
    tier: str | None
    grade: str | None


@dataclass(frozen=True, slots=True)
class DashboardSummary:
    """Everything the dashboard view renders."""

    overall_score: float | None
    overall_grade: str | None
    overall_tier: str | None
    completion: CompletionStats
    category_rows: tuple[CategoryScoreRow, ...]
    recommended_actions: tuple[RecommendedAction, ...]
    weakest_subcategories: tuple[SubmittedScore, ...] = ()
