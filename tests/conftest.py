"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

import toydesk.core.config as config_module
from toydesk.core.config import Settings


@pytest.fixture
def tmp_data_dir(tmp_path: Path) -> Path:
    """Create a temporary data directory structure."""
    (tmp_path / "logs").mkdir()
    (tmp_path / "db").mkdir()
    return tmp_path


@pytest.fixture
def settings(tmp_data_dir: Path) -> Settings:
    """Create Settings pointing at temp directories."""
    return Settings(
        openai_api_key="sk-test-key",
        data_dir=tmp_data_dir,
        log_level="DEBUG",
        _env_file=None,
    )


@pytest.fixture
def active_settings(settings: Settings, monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Install ``settings`` as the process-wide settings instance."""
    monkeypatch.setattr(config_module, "_settings", settings)
    return settings
