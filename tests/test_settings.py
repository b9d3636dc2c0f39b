"""Tests for environment-driven settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from assessment_app.core.settings import Settings


def test_defaults_point_at_bundled_data():
    settings = Settings(_env_file=None)

    assert settings.data_dir.name == "data"
    assert (settings.data_dir / "Heading.csv").is_file()
    assert settings.serve_resources is True
    assert settings.auto_advance_delay_ms == 1200
    assert settings.resource_url is None


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("ASSESSQT_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("ASSESSQT_PORT", "9000")
    monkeypatch.setenv("ASSESSQT_HOST", "0.0.0.0")
    monkeypatch.setenv("ASSESSQT_SERVE_RESOURCES", "false")

    settings = Settings(_env_file=None)

    assert settings.data_dir == Path(tmp_path)
    assert settings.port == 9000
    assert settings.serve_resources is False
    assert settings.local_resource_url() == "http://127.0.0.1:9000"


def test_negative_delay_is_rejected(monkeypatch):
    monkeypatch.setenv("ASSESSQT_AUTO_ADVANCE_DELAY_MS", "-1")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
