"""Tests for directory and HTTP resource sources."""

import httpx
import pytest

from assessment_app.core.resource_source import (
    DirectoryResourceSource,
    HttpResourceSource,
    ResourceFetchError,
)


def test_directory_source_reads_and_strips_bom(tmp_path):
    (tmp_path / "Heading.csv").write_bytes("\ufefficon,category\n".encode("utf-8"))

    source = DirectoryResourceSource(tmp_path)

    assert source.read_text("Heading.csv") == "icon,category\n"
    assert source.describe() == str(tmp_path)


def test_directory_source_missing_file(tmp_path):
    with pytest.raises(ResourceFetchError, match="was not found"):
        DirectoryResourceSource(tmp_path).read_text("Heading.csv")


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_http_source_builds_quoted_url():
    requested = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url)
        return httpx.Response(200, text="\ufeffcategory,subcategory\n")

    source = HttpResourceSource("http://assess.local/", client=_client(handler))

    assert source.read_text("Data Quality.csv") == "category,subcategory\n"
    assert source.resource_url("Data Quality.csv") == "http://assess.local/data/Data%20Quality.csv"
    assert requested[0].path == "/data/Data Quality.csv"
    assert source.describe() == "http://assess.local"


def test_http_source_error_status():
    source = HttpResourceSource(
        "http://assess.local",
        client=_client(lambda request: httpx.Response(404)),
    )

    with pytest.raises(ResourceFetchError, match="404 Not Found"):
        source.read_text("Heading.csv")


def test_http_source_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    source = HttpResourceSource("http://assess.local", client=_client(handler))

    with pytest.raises(ResourceFetchError, match="connection refused"):
        source.read_text("Heading.csv")


def test_http_source_malformed_base_url():
    source = HttpResourceSource("http://exa mple:99x")

    with pytest.raises(ResourceFetchError, match="Failed to fetch 'Heading.csv'"):
        source.read_text("Heading.csv")
