"""Background fetches of configuration and question resources."""

from __future__ import annotations

import logging
from threading import Thread

from PySide6.QtCore import QObject, Signal

from assessment_app.core.config_loader import ConfigurationError, load_category_config
from assessment_app.core.question_loader import load_question_set
from assessment_app.core.resource_source import ResourceFetchError, ResourceSource

logger = logging.getLogger(__name__)


class ResourceFetcher(QObject):
    """Runs each fetch on a short-lived worker thread and reports through signals.

    Signals are emitted from the worker thread; Qt queues them onto the
    thread that owns the receiving widgets.
    """

    catalogue_loaded = Signal(object)
    catalogue_failed = Signal(str)
    questions_loaded = Signal(int, object)
    questions_failed = Signal(int, str)

    def __init__(self, source: ResourceSource, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._source = source

    @property
    def source(self) -> ResourceSource:
        return self._source

    def fetch_catalogue(self) -> None:
        self._start(self._run_catalogue, "CatalogueFetch")

    def fetch_questions(self, token: int, category: str, subcategory: str) -> None:
        self._start(
            lambda: self._run_questions(token, category, subcategory),
            "QuestionFetch",
        )

    def _start(self, target, name: str) -> None:
        thread = Thread(target=target, name=name, daemon=True)
        thread.start()

    def _run_catalogue(self) -> None:
        try:
            catalogue = load_category_config(self._source)
        except (ResourceFetchError, ConfigurationError) as exc:
            logger.warning("Configuration fetch from %s failed: %s", self._source.describe(), exc)
            self.catalogue_failed.emit(str(exc))
            return
        self.catalogue_loaded.emit(catalogue)

    def _run_questions(self, token: int, category: str, subcategory: str) -> None:
        try:
            question_set = load_question_set(self._source, category, subcategory)
        except (ResourceFetchError, ConfigurationError) as exc:
            logger.warning("Question fetch for %s / %s failed: %s", category, subcategory, exc)
            self.questions_failed.emit(token, str(exc))
            return
        self.questions_loaded.emit(token, question_set)
