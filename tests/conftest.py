"""Shared pytest fixtures for unit and integration tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from mdsite.core.models import SiteConfig
from mdsite.core.settings import get_settings

BASE_TEMPLATE = (
    "<!DOCTYPE html>\n"
    "<html><head><title>{{ title }}</title></head>\n"
    "<body>{{ content | safe }}</body></html>\n"
)

SETTINGS_ENV = (
    "MDSITE_INPUT_DIR",
    "MDSITE_TEMPLATE_DIR",
    "MDSITE_OUT_DIR",
    "MDSITE_TEMPLATE_NAME",
    "MDSITE_SERVE",
    "MDSITE_PORT",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from MDSITE_* variables and the cached settings."""
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def site_dirs(tmp_path: Path) -> dict[str, Path]:
    """Create content/ and templates/ (with base.html); public/ is left to the build."""
    content = tmp_path / "content"
    templates = tmp_path / "templates"
    content.mkdir()
    templates.mkdir()
    (templates / "base.html").write_text(BASE_TEMPLATE, encoding="utf-8")
    return {
        "root": tmp_path,
        "content": content,
        "templates": templates,
        "public": tmp_path / "public",
    }


@pytest.fixture
def site_config(site_dirs: dict[str, Path]) -> SiteConfig:
    return SiteConfig(
        input_dir=site_dirs["content"],
        template_dir=site_dirs["templates"],
        out_dir=site_dirs["public"],
        template_name="base.html",
    )
