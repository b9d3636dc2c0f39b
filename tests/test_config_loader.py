"""Tests for the category configuration loader."""

import pytest

from assessment_app.core.config_loader import (
    ConfigurationError,
    load_category_config,
    parse_category_config,
)
from assessment_app.core.models import SubcategoryKey

from conftest import HEADING_CSV


def test_rows_accumulate_into_one_category():
    """Rows sharing a category build one entry in first-seen order."""
    catalogue = parse_category_config(HEADING_CSV)

    assert catalogue.names() == ["Data Quality", "Data Security"]
    quality = catalogue.get("Data Quality")
    assert quality.icon == "fa-star"
    assert quality.subcategories == ("Accuracy", "Completeness")
    assert quality.legend_for("Accuracy") == "1-Poor,5-Excellent"
    assert quality.legend_for("Completeness") is None


def test_flattened_pairs_follow_load_order():
    catalogue = parse_category_config(HEADING_CSV)

    assert catalogue.flattened_pairs() == [
        SubcategoryKey("Data Quality", "Accuracy"),
        SubcategoryKey("Data Quality", "Completeness"),
        SubcategoryKey("Data Security", "Access Control"),
    ]


def test_headers_are_trimmed_and_case_insensitive():
    text = " Icon , CATEGORY ,SubCategory, Legend \nfa-star, Data Quality , Accuracy ,\n"

    catalogue = parse_category_config(text)

    assert catalogue.get("Data Quality").subcategories == ("Accuracy",)


def test_rows_missing_category_or_icon_are_skipped():
    text = (
        "icon,category,subcategory,legend\n"
        ",Data Quality,Accuracy,\n"
        "fa-star,,Accuracy,\n"
        "fa-lock,Data Security,Encryption,\n"
    )

    catalogue = parse_category_config(text)

    assert catalogue.names() == ["Data Security"]


def test_none_subcategory_registers_category_without_subcategories():
    text = "icon,category,subcategory,legend\nfa-cog,Operations,None,\nfa-cog,Operations,,\n"

    catalogue = parse_category_config(text)

    assert catalogue.names() == ["Operations"]
    assert catalogue.get("Operations").subcategories == ()
    assert catalogue.flattened_pairs() == []


def test_duplicate_subcategories_keep_first_legend():
    text = (
        "icon,category,subcategory,legend\n"
        'fa-star,Data Quality,Accuracy,"1-Low,5-High"\n'
        'fa-star,Data Quality,Accuracy,"1-Other,5-Other"\n'
        "fa-star,Data Quality,Completeness,\n"
        'fa-star,Data Quality,Completeness,"1-Late,5-Early"\n'
    )

    catalogue = parse_category_config(text)
    quality = catalogue.get("Data Quality")

    assert quality.subcategories == ("Accuracy", "Completeness")
    assert quality.legend_for("Accuracy") == "1-Low,5-High"
    assert quality.legend_for("Completeness") == "1-Late,5-Early"


def test_first_icon_wins_for_a_category():
    text = "icon,category,subcategory\nfa-star,Data Quality,Accuracy\nfa-lock,Data Quality,Completeness\n"

    assert parse_category_config(text).get("Data Quality").icon == "fa-star"


def test_blank_rows_are_ignored():
    text = "icon,category,subcategory\n\n , , \nfa-star,Data Quality,Accuracy\n"

    assert parse_category_config(text).flattened_pairs() == [
        SubcategoryKey("Data Quality", "Accuracy")
    ]


def test_empty_resource_raises():
    with pytest.raises(ConfigurationError):
        parse_category_config("")


def test_header_without_category_column_raises():
    with pytest.raises(ConfigurationError, match="category"):
        parse_category_config("icon,name\nfa-star,Data Quality\n")


def test_header_only_yields_empty_catalogue():
    catalogue = parse_category_config("icon,category,subcategory,legend\n")

    assert catalogue.is_empty()
    assert len(catalogue) == 0


def test_load_category_config_reads_heading_resource(source):
    catalogue = load_category_config(source)

    assert catalogue.names() == ["Data Quality", "Data Security"]
