"""Service enforcing the linear completion order across subcategories."""

from __future__ import annotations

import logging

from assessment_app.constants.assessment_constants import (
    COMPLETED_STORAGE_KEY,
    QUESTION_COUNTS_STORAGE_KEY,
)
from assessment_app.core.models import CategoryCatalogue, SubcategoryKey
from assessment_app.core.services.answer_store import AnswerStore
from assessment_app.core.services.local_store import LocalStore

logger = logging.getLogger(__name__)


class SubcategoryLockedError(RuntimeError):
    """Raised when a subcategory is selected before its prerequisites are done."""

    def __init__(self, key: SubcategoryKey, message: str) -> None:
        super().__init__(message)
        self.key = key


class ProgressEngine:
    """Tracks completed subcategories and decides which ones are unlocked.

    The flattened (category, subcategory) order of the catalogue is the only
    order that matters: the first pair is always unlocked and any later pair
    is unlocked once every pair before it is complete.
    """

    def __init__(self, store: LocalStore, answer_store: AnswerStore) -> None:
        self._store = store
        self._answers = answer_store
        self._catalogue = CategoryCatalogue()
        self._pairs: list[SubcategoryKey] = []
        self._positions: dict[SubcategoryKey, int] = {}
        self._completed: set[SubcategoryKey] = set()
        self._question_counts: dict[SubcategoryKey, int] = self._load_question_counts()

    # --- Catalogue ---

    def set_catalogue(self, catalogue: CategoryCatalogue) -> None:
        self._catalogue = catalogue
        self._pairs = catalogue.flattened_pairs()
        self._positions = {pair: position for position, pair in enumerate(self._pairs)}
        self.recompute_completed()

    def has_pair(self, key: SubcategoryKey) -> bool:
        return key in self._positions

    def index_of(self, key: SubcategoryKey) -> int:
        try:
            return self._positions[key]
        except KeyError:
            raise ValueError(f"Unknown subcategory: {key.category} / {key.subcategory}") from None

    def next_pair(self, key: SubcategoryKey) -> SubcategoryKey | None:
        position = self.index_of(key) + 1
        if position < len(self._pairs):
            return self._pairs[position]
        return None

    # --- Question counts ---

    def record_question_count(self, key: SubcategoryKey, count: int) -> None:
        if self._question_counts.get(key) == count:
            return
        self._question_counts[key] = count
        self._save_question_counts()

    def expected_question_count(self, key: SubcategoryKey) -> int | None:
        return self._question_counts.get(key)

    # --- Completion ---

    def recompute_completed(self) -> set[SubcategoryKey]:
        """Rebuild the completed set from stored answers and known question counts.

        Pairs whose questions have never been loaded have no known count and
        are not complete. A loaded set with no questions is complete.
        """
        stored = self._load_completed()
        completed: set[SubcategoryKey] = set()
        for pair in self._pairs:
            expected = self._question_counts.get(pair)
            if expected is None:
                continue
            answered = sum(1 for index in self._answers.get_answers(*pair) if index < expected)
            if answered >= expected:
                completed.add(pair)
        # Keep entries for pairs outside the current catalogue untouched
        completed.update(pair for pair in stored if pair not in self._positions)
        self._completed = completed
        self._save_completed()
        logger.info(
            "Recomputed progress: %d of %d subcategories complete",
            len(self._completed_in_catalogue()),
            len(self._pairs),
        )
        return set(self._completed)

    def mark_complete(self, key: SubcategoryKey) -> bool:
        """Add ``key`` to the completed set; returns False if it already was."""
        if key in self._completed:
            return False
        self._completed.add(key)
        self._save_completed()
        return True

    def mark_incomplete(self, key: SubcategoryKey) -> None:
        if key in self._completed:
            self._completed.discard(key)
            self._save_completed()

    def is_complete(self, key: SubcategoryKey) -> bool:
        return key in self._completed

    def completed_count(self) -> int:
        return len(self._completed_in_catalogue())

    def total_count(self) -> int:
        return len(self._pairs)

    # --- Gating ---

    def is_unlocked(self, key: SubcategoryKey) -> bool:
        return self._prerequisite(key) is None

    def ensure_unlocked(self, key: SubcategoryKey) -> None:
        prerequisite = self._prerequisite(key)
        if prerequisite is not None:
            raise SubcategoryLockedError(key, self._lock_message(key, prerequisite))

    def unlocked_pairs(self) -> list[SubcategoryKey]:
        return [pair for pair in self._pairs if self.is_unlocked(pair)]

    def category_progress(self, category: str) -> float:
        entry = self._catalogue.get(category)
        if entry is None or not entry.subcategories:
            return 0.0
        done = sum(
            1 for sub in entry.subcategories if SubcategoryKey(category, sub) in self._completed
        )
        return done / len(entry.subcategories) * 100

    def _prerequisite(self, key: SubcategoryKey) -> SubcategoryKey | None:
        """Return the earliest incomplete pair before ``key``, if any."""
        position = self.index_of(key)
        return next((pair for pair in self._pairs[:position] if pair not in self._completed), None)

    def _lock_message(self, key: SubcategoryKey, blocking: SubcategoryKey) -> str:
        previous = self._pairs[self.index_of(key) - 1]
        if blocking != previous:
            return (
                f"'{key.subcategory}' is locked. Complete '{blocking.subcategory}' "
                f"in {blocking.category} and the subcategories after it first."
            )
        if previous.category != key.category:
            entry = self._catalogue.get(previous.category)
            subcategories = entry.subcategories if entry else (previous.subcategory,)
            names = ", ".join(f"'{sub}'" for sub in subcategories)
            return (
                f"'{key.subcategory}' is locked. Complete every subcategory of "
                f"{previous.category} ({names}) first."
            )
        return (
            f"'{key.subcategory}' is locked. Complete '{previous.subcategory}' "
            f"in {previous.category} first."
        )

    # --- Persistence ---

    def _completed_in_catalogue(self) -> set[SubcategoryKey]:
        return {pair for pair in self._completed if pair in self._positions}

    def _load_completed(self) -> set[SubcategoryKey]:
        raw = self._store.read_json(COMPLETED_STORAGE_KEY, [])
        if not isinstance(raw, list):
            logger.warning("Stored completed set is not a list; ignoring it")
            return set()
        completed: set[SubcategoryKey] = set()
        for item in raw:
            if (
                isinstance(item, list)
                and len(item) == 2
                and all(isinstance(part, str) for part in item)
            ):
                completed.add(SubcategoryKey(item[0], item[1]))
        return completed

    def _save_completed(self) -> None:
        ordered = sorted(
            self._completed,
            key=lambda pair: (self._positions.get(pair, len(self._pairs)), pair),
        )
        self._store.write_json(COMPLETED_STORAGE_KEY, [list(pair) for pair in ordered])

    def _load_question_counts(self) -> dict[SubcategoryKey, int]:
        raw = self._store.read_json(QUESTION_COUNTS_STORAGE_KEY, {})
        if not isinstance(raw, dict):
            logger.warning("Stored question counts are not a mapping; ignoring them")
            return {}
        counts: dict[SubcategoryKey, int] = {}
        for category, by_subcategory in raw.items():
            if not isinstance(by_subcategory, dict):
                continue
            for subcategory, count in by_subcategory.items():
                if isinstance(count, int) and not isinstance(count, bool) and count >= 0:
                    counts[SubcategoryKey(category, subcategory)] = count
        return counts

    def _save_question_counts(self) -> None:
        payload: dict[str, dict[str, int]] = {}
        for pair, count in self._question_counts.items():
            payload.setdefault(pair.category, {})[pair.subcategory] = count
        self._store.write_json(QUESTION_COUNTS_STORAGE_KEY, payload)
