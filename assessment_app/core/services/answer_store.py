"""Service holding the per-question answers of every subcategory."""

from __future__ import annotations

import logging

from assessment_app.constants.assessment_constants import ANSWERS_STORAGE_KEY
from assessment_app.core.services.local_store import LocalStore

logger = logging.getLogger(__name__)

AnswerMap = dict[str, dict[str, dict[int, int]]]


class AnswerStore:
    """Persists ``category -> subcategory -> question index -> score``.

    Every mutation reads the full structure from storage, changes it in
    memory and writes the whole structure back.
    """

    def __init__(self, store: LocalStore, storage_key: str = ANSWERS_STORAGE_KEY) -> None:
        self._store = store
        self._storage_key = storage_key

    def set_answer(self, category: str, subcategory: str, index: int, value: int) -> None:
        if index < 0:
            raise ValueError("Question index must not be negative.")
        answers = self._load()
        answers.setdefault(category, {}).setdefault(subcategory, {})[index] = int(value)
        self._save(answers)

    def reset_subcategory(self, category: str, subcategory: str) -> None:
        answers = self._load()
        by_subcategory = answers.get(category)
        if by_subcategory is not None:
            by_subcategory.pop(subcategory, None)
            if not by_subcategory:
                del answers[category]
        self._save(answers)

    def get_answers(self, category: str, subcategory: str) -> dict[int, int]:
        return dict(self._load().get(category, {}).get(subcategory, {}))

    def answered_count(self, category: str, subcategory: str) -> int:
        return len(self.get_answers(category, subcategory))

    def all_answers(self) -> AnswerMap:
        return self._load()

    def _load(self) -> AnswerMap:
        raw = self._store.read_json(self._storage_key, {})
        return _coerce_answer_map(raw)

    def _save(self, answers: AnswerMap) -> None:
        serialisable = {
            category: {
                subcategory: {str(index): value for index, value in sorted(values.items())}
                for subcategory, values in by_subcategory.items()
            }
            for category, by_subcategory in answers.items()
        }
        self._store.write_json(self._storage_key, serialisable)


def _coerce_answer_map(raw: object) -> AnswerMap:
    """Validate a decoded answer document, dropping anything malformed."""
    if not isinstance(raw, dict):
        logger.warning("Stored answers are not a mapping; starting from an empty answer set")
        return {}

    answers: AnswerMap = {}
    for category, by_subcategory in raw.items():
        if not isinstance(by_subcategory, dict):
            logger.warning("Ignoring malformed stored answers for category '%s'", category)
            continue
        for subcategory, values in by_subcategory.items():
            if not isinstance(values, dict):
                logger.warning(
                    "Ignoring malformed stored answers for '%s / %s'", category, subcategory
                )
                continue
            cleaned: dict[int, int] = {}
            for raw_index, raw_value in values.items():
                try:
                    index = int(raw_index)
                except (TypeError, ValueError):
                    continue
                # bool is an int subclass; a stored true/false is not a score
                if isinstance(raw_value, bool) or not isinstance(raw_value, int) or index < 0:
                    continue
                cleaned[index] = raw_value
            if cleaned:
                answers.setdefault(category, {})[subcategory] = cleaned
    return answers
