"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from assessment_app.core.assessment_manager import AssessmentManager
from assessment_app.core.resource_source import DirectoryResourceSource
from assessment_app.core.services.local_store import InMemoryStore

HEADING_CSV = (
    "icon,category,subcategory,legend\n"
    'fa-star,Data Quality,Accuracy,"1-Poor,5-Excellent"\n'
    "fa-star,Data Quality,Completeness,\n"
    "fa-lock,Data Security,Access Control,\n"
)

DATA_QUALITY_CSV = (
    "category,subcategory,question,definition,options\n"
    'Data Quality,Accuracy,Is data validated?,Accuracy is correctness.,"1,2,3,4,5"\n'
    'Data Quality,Accuracy,Do figures match the source?,,"1,2,3,4,5"\n'
    'Data Quality,Accuracy,Are errors corrected quickly?,,"1,2,3,4,5"\n'
    'Data Quality,Completeness,Are mandatory fields filled?,,"1,2,3,4,5"\n'
    'Data Quality,Completeness,Are gaps documented?,,"1,2,3,4,5"\n'
)

DATA_SECURITY_CSV = (
    "category,subcategory,question,definition,options\n"
    'Data Security,Access Control,Is least privilege enforced?,,"1,3,5"\n'
)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "data"
    directory.mkdir()
    (directory / "Heading.csv").write_text(HEADING_CSV, encoding="utf-8")
    (directory / "Data Quality.csv").write_text(DATA_QUALITY_CSV, encoding="utf-8")
    (directory / "Data Security.csv").write_text(DATA_SECURITY_CSV, encoding="utf-8")
    return directory


@pytest.fixture
def source(data_dir: Path) -> DirectoryResourceSource:
    return DirectoryResourceSource(data_dir)


@pytest.fixture
def manager(store: InMemoryStore, source: DirectoryResourceSource) -> AssessmentManager:
    assessment_manager = AssessmentManager(store, auto_advance_delay_ms=0)
    assessment_manager.load_catalogue(source)
    return assessment_manager


def answer_all(manager: AssessmentManager, values: list[int]):
    """Answer the active question set in order and return the last result."""
    result = None
    for index, value in enumerate(values):
        result = manager.set_answer(index, value)
    return result
