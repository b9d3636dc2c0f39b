"""Builds the category catalogue from the configuration resource.

File format (CSV, header row required, headers matched case-insensitively):

    icon,category,subcategory,legend
    fa-star,Data Quality,Accuracy,"1-Poor,5-Excellent"
    fa-star,Data Quality,Completeness,
    fa-lock,Data Security,none,

One row per (category, subcategory) pair; rows sharing a category accumulate
into one entry in first-seen order. A subcategory of ``none`` registers the
category without adding a subcategory. Rows without a category or an icon are
skipped, and a repeated subcategory keeps the legend it was first given.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
import io
import logging

from assessment_app.constants.assessment_constants import (
    CONFIG_RESOURCE_NAME,
    NONE_SUBCATEGORY_MARKER,
)
from assessment_app.core.models import Category, CategoryCatalogue
from assessment_app.core.resource_source import ResourceSource

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when the configuration resource cannot be parsed."""


_REQUIRED_COLUMNS = ("category",)


@dataclass(slots=True)
class _CategoryBuilder:
    icon: str
    subcategories: list[str] = field(default_factory=list)
    legends: dict[str, str] = field(default_factory=dict)

    def add_subcategory(self, subcategory: str, legend: str | None) -> None:
        if subcategory not in self.subcategories:
            self.subcategories.append(subcategory)
        if legend and subcategory not in self.legends:
            self.legends[subcategory] = legend


def load_category_config(source: ResourceSource) -> CategoryCatalogue:
    """Fetch and parse the configuration resource from ``source``."""
    text = source.read_text(CONFIG_RESOURCE_NAME)
    return parse_category_config(text)


def parse_category_config(text: str) -> CategoryCatalogue:
    rows = read_csv_rows(text)
    builders: dict[str, _CategoryBuilder] = {}

    for line_number, row in enumerate(rows, start=2):
        category = row.get("category", "")
        icon = row.get("icon", "")
        if not category or not icon:
            logger.debug("Skipping configuration row %d: missing category or icon", line_number)
            continue

        builder = builders.get(category)
        if builder is None:
            builder = _CategoryBuilder(icon=icon)
            builders[category] = builder

        subcategory = row.get("subcategory", "")
        if not subcategory or subcategory.lower() == NONE_SUBCATEGORY_MARKER:
            continue
        builder.add_subcategory(subcategory, row.get("legend") or None)

    categories = tuple(
        Category(
            name=name,
            icon=builder.icon,
            subcategories=tuple(builder.subcategories),
            legends=dict(builder.legends),
        )
        for name, builder in builders.items()
    )
    logger.info(
        "Loaded %d categories with %d subcategories",
        len(categories),
        sum(len(category.subcategories) for category in categories),
    )
    return CategoryCatalogue(categories=categories)


def read_csv_rows(text: str, required: tuple[str, ...] = _REQUIRED_COLUMNS) -> list[dict[str, str]]:
    """Parse CSV text into rows keyed by trimmed, lower-cased header names.

    Cell values are stripped; blank rows are dropped. Shared with the
    question loader so both resources follow the same header rules.
    """
    reader = csv.reader(io.StringIO(text))
    try:
        raw_header = next(reader)
    except StopIteration as exc:
        raise ConfigurationError("Resource is empty; a header row is required.") from exc
    except csv.Error as exc:
        raise ConfigurationError(f"Unable to read header row: {exc}") from exc

    header = [column.strip().lower() for column in raw_header]
    missing = [column for column in required if column not in header]
    if missing:
        raise ConfigurationError(
            f"Header row is missing required column(s): {', '.join(missing)}."
        )

    rows: list[dict[str, str]] = []
    try:
        for raw_row in reader:
            if not any(cell.strip() for cell in raw_row):
                continue
            row: dict[str, str] = {}
            for column, value in zip(header, raw_row):
                # Duplicate headers keep the first non-empty value
                if column and not row.get(column):
                    row[column] = value.strip()
            rows.append(row)
    except csv.Error as exc:
        raise ConfigurationError(f"Malformed CSV content: {exc}") from exc
    return rows
