"""Tests for completion tracking and subcategory gating."""

import json

import pytest

from assessment_app.constants.assessment_constants import (
    COMPLETED_STORAGE_KEY,
    QUESTION_COUNTS_STORAGE_KEY,
)
from assessment_app.core.config_loader import parse_category_config
from assessment_app.core.models import SubcategoryKey
from assessment_app.core.services.answer_store import AnswerStore
from assessment_app.core.services.progress_engine import ProgressEngine, SubcategoryLockedError

from conftest import HEADING_CSV

ACCURACY = SubcategoryKey("Data Quality", "Accuracy")
COMPLETENESS = SubcategoryKey("Data Quality", "Completeness")
ACCESS = SubcategoryKey("Data Security", "Access Control")


@pytest.fixture
def answers(store):
    return AnswerStore(store)


@pytest.fixture
def engine(store, answers):
    progress = ProgressEngine(store, answers)
    progress.set_catalogue(parse_category_config(HEADING_CSV))
    return progress


def test_only_first_pair_unlocked_initially(engine):
    assert engine.is_unlocked(ACCURACY)
    assert not engine.is_unlocked(COMPLETENESS)
    assert not engine.is_unlocked(ACCESS)
    assert engine.unlocked_pairs() == [ACCURACY]


def test_completing_a_pair_unlocks_the_next(engine):
    assert engine.mark_complete(ACCURACY)
    assert not engine.mark_complete(ACCURACY)

    assert engine.is_unlocked(COMPLETENESS)
    assert not engine.is_unlocked(ACCESS)
    assert engine.unlocked_pairs() == [ACCURACY, COMPLETENESS]


def test_pair_needs_every_earlier_pair_complete(engine):
    engine.mark_complete(COMPLETENESS)

    assert not engine.is_unlocked(ACCESS)
    assert engine.unlocked_pairs() == [ACCURACY]

    with pytest.raises(SubcategoryLockedError, match="Complete 'Accuracy' in Data Quality and the subcategories after it"):
        engine.ensure_unlocked(ACCESS)


def test_locked_message_names_previous_subcategory(engine):
    with pytest.raises(SubcategoryLockedError, match="Complete 'Accuracy' in Data Quality first") as info:
        engine.ensure_unlocked(COMPLETENESS)

    assert info.value.key == COMPLETENESS


def test_first_subcategory_of_category_names_previous_category(engine):
    engine.mark_complete(ACCURACY)

    with pytest.raises(SubcategoryLockedError) as info:
        engine.ensure_unlocked(ACCESS)

    assert "every subcategory of Data Quality ('Accuracy', 'Completeness')" in str(info.value)


def test_next_pair_follows_flattened_order(engine):
    assert engine.next_pair(ACCURACY) == COMPLETENESS
    assert engine.next_pair(COMPLETENESS) == ACCESS
    assert engine.next_pair(ACCESS) is None


def test_unknown_pair_is_rejected(engine):
    with pytest.raises(ValueError):
        engine.index_of(SubcategoryKey("Data Quality", "Timeliness"))


def test_category_progress_and_counts(engine):
    engine.mark_complete(ACCURACY)

    assert engine.category_progress("Data Quality") == 50.0
    assert engine.category_progress("Data Security") == 0.0
    assert engine.category_progress("Unknown") == 0.0
    assert engine.completed_count() == 1
    assert engine.total_count() == 3


def test_mark_incomplete_relocks_later_pairs(engine):
    engine.mark_complete(ACCURACY)
    engine.mark_complete(COMPLETENESS)

    engine.mark_incomplete(ACCURACY)

    assert not engine.is_complete(ACCURACY)
    assert not engine.is_unlocked(COMPLETENESS)


def test_recompute_uses_recorded_question_counts(store, answers, engine):
    engine.record_question_count(ACCURACY, 3)
    for index, value in enumerate([4, 5, 3]):
        answers.set_answer(*ACCURACY, index, value)

    completed = engine.recompute_completed()

    assert completed == {ACCURACY}
    assert json.loads(store.get_item(COMPLETED_STORAGE_KEY)) == [["Data Quality", "Accuracy"]]
    assert json.loads(store.get_item(QUESTION_COUNTS_STORAGE_KEY)) == {
        "Data Quality": {"Accuracy": 3}
    }


def test_recompute_ignores_answers_beyond_question_count(answers, engine):
    engine.record_question_count(ACCURACY, 3)
    for index in (0, 1, 5):
        answers.set_answer(*ACCURACY, index, 4)

    assert ACCURACY not in engine.recompute_completed()


def test_completion_state_survives_restart(store, answers, engine):
    engine.record_question_count(ACCURACY, 3)
    for index in range(3):
        answers.set_answer(*ACCURACY, index, 4)
    engine.mark_complete(ACCURACY)

    reloaded = ProgressEngine(store, AnswerStore(store))
    reloaded.set_catalogue(parse_category_config(HEADING_CSV))

    assert reloaded.is_complete(ACCURACY)
    assert reloaded.expected_question_count(ACCURACY) == 3
    assert reloaded.is_unlocked(COMPLETENESS)


def test_pairs_never_loaded_are_not_complete(store, answers):
    store.write_json(COMPLETED_STORAGE_KEY, [["Data Quality", "Accuracy"], ["Old", "Gone"]])

    engine = ProgressEngine(store, answers)
    engine.set_catalogue(parse_category_config(HEADING_CSV))

    assert not engine.is_complete(ACCURACY)
    assert not engine.is_unlocked(COMPLETENESS)
    assert engine.completed_count() == 0
    assert ["Old", "Gone"] in json.loads(store.get_item(COMPLETED_STORAGE_KEY))


def test_malformed_completed_set_is_ignored(store, answers, caplog):
    store.set_item(COMPLETED_STORAGE_KEY, json.dumps({"Data Quality": "Accuracy"}))

    engine = ProgressEngine(store, answers)
    engine.set_catalogue(parse_category_config(HEADING_CSV))

    assert engine.completed_count() == 0
    assert "not a list" in caplog.text


def test_recompute_treats_empty_question_set_as_complete(store, answers, engine):
    engine.record_question_count(ACCURACY, 0)

    assert engine.recompute_completed() == {ACCURACY}
    assert engine.is_unlocked(COMPLETENESS)
