"""Loads the question set for one subcategory.

Each category has its own question resource, named after the category's exact
display string (``Data Quality.csv``):

    category,subcategory,question,definition,options
    Data Quality,Accuracy,How often is data validated?,Accuracy measures ...,"1,2,3,4,5"

Rows are matched case-insensitively on category and subcategory. A row only
becomes a question when it has both question text and options; options are
comma separated integers and anything non-numeric is dropped.
"""

from __future__ import annotations

import logging

from assessment_app.constants.assessment_constants import (
    OPTIONS_DELIMITER,
    QUESTION_RESOURCE_SUFFIX,
)
from assessment_app.core.config_loader import read_csv_rows
from assessment_app.core.models import Question, QuestionSet
from assessment_app.core.resource_source import ResourceSource

logger = logging.getLogger(__name__)

_REQUIRED_COLUMNS = ("category", "subcategory")


def question_resource_name(category: str) -> str:
    return f"{category}{QUESTION_RESOURCE_SUFFIX}"


def load_question_set(source: ResourceSource, category: str, subcategory: str) -> QuestionSet:
    """Fetch the category's question resource and filter it to one subcategory."""
    text = source.read_text(question_resource_name(category))
    return parse_question_rows(text, category, subcategory)


def parse_question_rows(text: str, category: str, subcategory: str) -> QuestionSet:
    rows = read_csv_rows(text, required=_REQUIRED_COLUMNS)
    wanted_category = category.strip().lower()
    wanted_subcategory = subcategory.strip().lower()

    questions: list[Question] = []
    definition: str | None = None

    for row in rows:
        if row.get("category", "").lower() != wanted_category:
            continue
        if row.get("subcategory", "").lower() != wanted_subcategory:
            continue

        if definition is None and row.get("definition"):
            definition = row["definition"]

        text_value = row.get("question", "")
        options = parse_options(row.get("options", ""))
        if not text_value or not options:
            continue
        questions.append(Question(index=len(questions), text=text_value, options=options))

    logger.info(
        "Loaded %d question(s) for %s / %s", len(questions), category, subcategory
    )
    return QuestionSet(
        category=category,
        subcategory=subcategory,
        questions=tuple(questions),
        definition=definition,
    )


def parse_options(raw_value: str) -> tuple[int, ...]:
    """Parse ``"1, 2, x, 3"`` into ``(1, 2, 3)``."""
    options: list[int] = []
    for token in raw_value.split(OPTIONS_DELIMITER):
        token = token.strip()
        try:
            value = int(token)
        except ValueError:
            continue
        if value not in options:
            options.append(value)
    return tuple(options)
