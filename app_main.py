"""Application entry point for AssessQt."""

from __future__ import annotations

import logging
import sys

from PySide6.QtWidgets import QApplication

from assessment_app.core.assessment_manager import AssessmentManager
from assessment_app.core.resource_source import (
    DirectoryResourceSource,
    HttpResourceSource,
    ResourceSource,
)
from assessment_app.core.services.local_store import JsonFileStore
from assessment_app.core.settings import Settings, get_settings
from assessment_app.server.resource_server import start_resource_server
from assessment_app.ui.assessment_main_window import AssessmentMainWindow
from assessment_app.ui.resource_fetcher import ResourceFetcher
from assessment_app.utils.logging_config import configure_logging


def _build_resource_source(settings: Settings, logger: logging.Logger) -> ResourceSource:
    """Pick where Heading.csv and the question files are read from."""
    if settings.resource_url:
        return HttpResourceSource(settings.resource_url, timeout=settings.fetch_timeout_seconds)
    if settings.serve_resources:
        start_resource_server(data_dir=settings.data_dir, host=settings.host, port=settings.port)
        return HttpResourceSource(
            settings.local_resource_url(), timeout=settings.fetch_timeout_seconds
        )
    logger.info("Reading resources directly from %s", settings.data_dir)
    return DirectoryResourceSource(settings.data_dir)


def main() -> None:
    """Load settings, start the resource server if enabled, and launch the Qt UI."""
    settings = get_settings()
    logger = configure_logging(settings.log_level)
    logger.info("Starting AssessQt...")

    store = JsonFileStore(settings.state_path)
    logger.info("Assessment state stored in %s", store.path)
    assessment_manager = AssessmentManager(
        store, auto_advance_delay_ms=settings.auto_advance_delay_ms
    )
    source = _build_resource_source(settings, logger)
    logger.info("Resources served from %s", source.describe())

    app = QApplication(sys.argv)
    fetcher = ResourceFetcher(source)
    window = AssessmentMainWindow(assessment_manager=assessment_manager, fetcher=fetcher)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
