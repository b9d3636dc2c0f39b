"""FastAPI server that exposes the CSV resources the assessment is built from."""

from __future__ import annotations

import logging
from pathlib import Path
from threading import Thread
import time

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel
import uvicorn

from assessment_app.constants.about import APP_NAME, APP_VERSION
from assessment_app.constants.network_constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    RESOURCE_ROUTE_PREFIX,
)
from assessment_app.core.resource_source import DirectoryResourceSource, ResourceFetchError

logger = logging.getLogger(__name__)

_CSV_MEDIA_TYPE = "text/csv; charset=utf-8"
_STARTUP_TIMEOUT_SECONDS = 5.0


class HealthResponse(BaseModel):
    """Payload schema for the health check."""

    status: str
    app: str
    version: str


class ResourceListing(BaseModel):
    """Payload schema for the resource index."""

    resources: list[str]


def _get_source_dependency(source: DirectoryResourceSource):
    def dependency() -> DirectoryResourceSource:
        return source

    return dependency


def _resolve_resource(root: Path, name: str) -> Path:
    """Map ``name`` to a CSV file directly inside ``root`` or raise 404."""
    candidate = (root / name).resolve()
    if (
        candidate.parent != root.resolve()
        or candidate.suffix.lower() != ".csv"
        or not candidate.is_file()
    ):
        raise HTTPException(status_code=404, detail=f"Resource '{name}' not found.")
    return candidate


def create_resource_app(data_dir: Path) -> FastAPI:
    """Create a FastAPI application serving CSV files from ``data_dir``."""
    app = FastAPI(title=f"{APP_NAME} Resources", version=APP_VERSION)
    source_dep = _get_source_dependency(DirectoryResourceSource(Path(data_dir)))

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(status="ok", app=APP_NAME, version=APP_VERSION)

    @app.get(RESOURCE_ROUTE_PREFIX, response_model=ResourceListing)
    def list_resources(
        source: DirectoryResourceSource = Depends(source_dep),
    ) -> ResourceListing:
        if not source.root.is_dir():
            return ResourceListing(resources=[])
        names = sorted(path.name for path in source.root.glob("*.csv") if path.is_file())
        return ResourceListing(resources=names)

    @app.get(RESOURCE_ROUTE_PREFIX + "/{name}")
    def get_resource(
        name: str,
        source: DirectoryResourceSource = Depends(source_dep),
    ) -> Response:
        path = _resolve_resource(source.root, name)
        try:
            text = source.read_text(path.name)
        except ResourceFetchError as exc:
            logger.error("Unable to serve %s: %s", name, exc)
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return Response(content=text, media_type=_CSV_MEDIA_TYPE)

    return app


def start_resource_server(
    data_dir: Path,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the resource server in a background daemon thread."""
    app = create_resource_app(data_dir)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="warning")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="ResourceServer", daemon=True)
    thread.start()

    # Resources are fetched right after startup, so wait for the socket to be bound
    deadline = time.monotonic() + _STARTUP_TIMEOUT_SECONDS
    while not server.started and thread.is_alive() and time.monotonic() < deadline:
        time.sleep(0.05)
    if not server.started:
        logger.warning("Resource server did not report readiness within %.0fs", _STARTUP_TIMEOUT_SECONDS)
    logger.info("Serving resources from %s on http://%s:%d", data_dir, host, port)
    return thread
