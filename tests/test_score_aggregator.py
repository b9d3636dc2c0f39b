"""Tests for score aggregation and the dashboard summary."""

import pytest

from assessment_app.core.config_loader import parse_category_config
from assessment_app.core.models import SubcategoryKey
from assessment_app.core.services.answer_store import AnswerStore
from assessment_app.core.services.progress_engine import ProgressEngine
from assessment_app.core.services.score_aggregator import ScoreAggregator
from assessment_app.core.services.submitted_scores import SubmittedScoreRepository

CATALOGUE_CSV = (
    "icon,category,subcategory\n"
    "fa-star,Data Quality,Accuracy\n"
    "fa-star,Data Quality,Completeness\n"
    "fa-star,Data Quality,Timeliness\n"
    "fa-lock,Data Security,Access Control\n"
    "fa-users,Data Governance,Ownership\n"
)


@pytest.fixture
def catalogue():
    return parse_category_config(CATALOGUE_CSV)


@pytest.fixture
def parts(store, catalogue):
    answers = AnswerStore(store)
    scores = SubmittedScoreRepository(store)
    progress = ProgressEngine(store, answers)
    progress.set_catalogue(catalogue)
    return answers, scores, progress, ScoreAggregator(answers, scores, progress)


def test_live_average_uses_answered_questions_only(parts):
    answers, _, _, aggregator = parts
    assert aggregator.live_average("Data Quality", "Accuracy") is None

    answers.set_answer("Data Quality", "Accuracy", 0, 4)
    answers.set_answer("Data Quality", "Accuracy", 1, 5)

    assert aggregator.live_average("Data Quality", "Accuracy") == 4.5


def test_submit_stores_rounded_average(parts):
    answers, scores, _, aggregator = parts
    for index, value in enumerate([4, 5, 3]):
        answers.set_answer("Data Quality", "Accuracy", index, value)

    entry = aggregator.submit("Data Quality", "Accuracy")

    assert entry.average_score == 4.0
    assert scores.get_score("Data Quality", "Accuracy") == 4.0


def test_submit_without_answers_does_nothing(parts):
    _, scores, _, aggregator = parts

    assert aggregator.submit("Data Quality", "Accuracy") is None
    assert scores.get_scores() == []


def test_missing_scores_are_excluded_from_means(parts, catalogue):
    _, scores, _, aggregator = parts
    scores.upsert("Data Quality", "Accuracy", 4.0)
    scores.upsert("Data Quality", "Completeness", 3.0)
    scores.upsert("Data Security", "Access Control", 2.0)

    assert aggregator.category_scores(catalogue) == {"Data Quality": 3.5, "Data Security": 2.0}
    assert aggregator.overall_score(catalogue) == pytest.approx(2.75)


def test_overall_score_is_none_without_scores(parts, catalogue):
    _, _, _, aggregator = parts

    assert aggregator.overall_score(catalogue) is None


def test_recommended_actions_from_thresholds(parts, catalogue):
    _, scores, _, aggregator = parts
    scores.upsert("Data Quality", "Accuracy", 2.5)
    scores.upsert("Data Quality", "Completeness", 4.0)
    scores.upsert("Data Security", "Access Control", 1.5)

    actions = aggregator.recommended_actions(catalogue)

    assert [(a.title, a.priority) for a in actions] == [
        ("Improve Access Control in Data Security", "high"),
        ("Improve Accuracy in Data Quality", "medium"),
    ]
    assert actions[0].key == SubcategoryKey("Data Security", "Access Control")


def test_start_action_when_nothing_submitted(parts, catalogue):
    _, _, _, aggregator = parts

    actions = aggregator.recommended_actions(catalogue)

    assert [a.title for a in actions] == ["Start your assessment"]
    assert actions[0].key is None


def test_continue_action_when_few_weak_scores(parts, catalogue):
    _, scores, _, aggregator = parts
    scores.upsert("Data Quality", "Accuracy", 4.5)

    actions = aggregator.recommended_actions(catalogue)

    assert [a.title for a in actions] == ["Continue your assessment"]


def test_actions_are_capped_and_high_first(store):
    rows = "".join(f"fa-star,Cat,Sub{i}\n" for i in range(7))
    catalogue = parse_category_config("icon,category,subcategory\n" + rows)
    answers = AnswerStore(store)
    scores = SubmittedScoreRepository(store)
    progress = ProgressEngine(store, answers)
    progress.set_catalogue(catalogue)
    aggregator = ScoreAggregator(answers, scores, progress)
    for i, value in enumerate([2.5, 2.5, 2.5, 2.5, 2.5, 1.0, 1.5]):
        scores.upsert("Cat", f"Sub{i}", value)

    actions = aggregator.recommended_actions(catalogue)

    assert len(actions) == 5
    assert [a.subcategory for a in actions] == ["Sub5", "Sub6", "Sub0", "Sub1", "Sub2"]


def test_build_summary(parts, catalogue):
    _, scores, progress, aggregator = parts
    scores.upsert("Data Quality", "Accuracy", 4.0)
    scores.upsert("Data Quality", "Completeness", 4.5)
    scores.upsert("Data Security", "Access Control", 2.0)
    progress.mark_complete(SubcategoryKey("Data Quality", "Accuracy"))
    progress.mark_complete(SubcategoryKey("Data Quality", "Completeness"))

    summary = aggregator.build_summary(catalogue)

    assert summary.overall_score == 3.1
    assert summary.overall_grade == "B"
    assert summary.overall_tier == "medium"
    assert summary.completion.completed == 2
    assert summary.completion.total == 5
    assert summary.completion.percentage == 40

    rows = {row.name: row for row in summary.category_rows}
    assert rows["Data Quality"].score == 4.3
    assert rows["Data Quality"].grade == "A"
    assert rows["Data Quality"].progress_percentage == pytest.approx(200 / 3)
    assert rows["Data Governance"].score is None
    assert rows["Data Governance"].tier is None

    assert [s.subcategory for s in summary.weakest_subcategories] == [
        "Access Control",
        "Accuracy",
        "Completeness",
    ]
