"""Service for the durable list of submitted subcategory scores."""

from __future__ import annotations

from datetime import datetime, timezone
import logging

from assessment_app.constants.assessment_constants import (
    SUBMITTED_SCORES_STORAGE_KEY,
)
from assessment_app.core.models import SubcategoryKey, SubmittedScore
from assessment_app.core.score_math import round_score
from assessment_app.core.services.local_store import LocalStore

logger = logging.getLogger(__name__)


class SubmittedScoreRepository:
    """Keeps at most one ``SubmittedScore`` per (category, subcategory)."""

    def __init__(
        self,
        store: LocalStore,
        storage_key: str = SUBMITTED_SCORES_STORAGE_KEY,
    ) -> None:
        self._store = store
        self._storage_key = storage_key

    def upsert(self, category: str, subcategory: str, average_score: float) -> SubmittedScore:
        """Store ``average_score`` for the pair, replacing any earlier entry."""
        entry = SubmittedScore(
            category=category,
            subcategory=subcategory,
            average_score=round_score(average_score),
            submitted_at=datetime.now(timezone.utc),
        )
        scores = [s for s in self.get_scores() if s.key != entry.key]
        scores.append(entry)
        self._save(scores)
        return entry

    def remove(self, category: str, subcategory: str) -> None:
        key = SubcategoryKey(category, subcategory)
        scores = self.get_scores()
        remaining = [s for s in scores if s.key != key]
        if len(remaining) != len(scores):
            self._save(remaining)

    def get_scores(self) -> list[SubmittedScore]:
        raw = self._store.read_json(self._storage_key, [])
        # Older snapshots stored a single object instead of a list
        if isinstance(raw, dict):
            raw = [raw]
        if not isinstance(raw, list):
            logger.warning("Stored scores are not a list; ignoring them")
            return []

        scores: dict[SubcategoryKey, SubmittedScore] = {}
        for item in raw:
            entry = _parse_entry(item)
            if entry is not None:
                scores[entry.key] = entry
        return list(scores.values())

    def get_score(self, category: str, subcategory: str) -> float | None:
        key = SubcategoryKey(category, subcategory)
        return next((s.average_score for s in self.get_scores() if s.key == key), None)

    def clear(self) -> None:
        self._store.remove_item(self._storage_key)

    def _save(self, scores: list[SubmittedScore]) -> None:
        payload = [
            {
                "category": s.category,
                "subcategory": s.subcategory,
                "averageScore": s.average_score,
                "submittedAt": s.submitted_at.isoformat() if s.submitted_at else None,
            }
            for s in scores
        ]
        self._store.write_json(self._storage_key, payload)


def _parse_entry(item: object) -> SubmittedScore | None:
    if not isinstance(item, dict):
        return None
    category = item.get("category")
    subcategory = item.get("subcategory")
    average = item.get("averageScore")
    if not isinstance(category, str) or not isinstance(subcategory, str):
        return None
    if isinstance(average, bool) or not isinstance(average, (int, float)):
        return None

    submitted_at = None
    raw_timestamp = item.get("submittedAt")
    if isinstance(raw_timestamp, str):
        try:
            submitted_at = datetime.fromisoformat(raw_timestamp)
        except ValueError:
            submitted_at = None
    return SubmittedScore(
        category=category,
        subcategory=subcategory,
        average_score=float(average),
        submitted_at=submitted_at,
    )
