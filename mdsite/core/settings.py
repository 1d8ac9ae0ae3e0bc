from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import SiteConfig


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MDSITE_", case_sensitive=False)

    input_dir: Path = Path("content")
    template_dir: Path = Path("templates")
    out_dir: Path = Path("public")
    template_name: str = "base.html"
    serve: bool = False
    port: int = 8080


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def resolve_config(
    settings: Settings,
    *,
    input_dir: Path | None = None,
    template_dir: Path | None = None,
    out_dir: Path | None = None,
    template_name: str | None = None,
    serve: bool = False,
    port: int | None = None,
    verbose: bool = False,
) -> SiteConfig:
    """Merge explicit command-line values over the environment defaults.

    Args:
        settings: Environment-driven defaults
        input_dir: Markdown source directory override
        template_dir: Template directory override
        out_dir: Output directory override
        template_name: Page template override
        serve: Serve after building (either source enables it)
        port: Server port override
        verbose: Enable debug logging

    Returns:
        Frozen configuration for the run
    """
    return SiteConfig(
        input_dir=input_dir if input_dir is not None else settings.input_dir,
        template_dir=template_dir if template_dir is not None else settings.template_dir,
        out_dir=out_dir if out_dir is not None else settings.out_dir,
        template_name=template_name if template_name is not None else settings.template_name,
        serve=serve or settings.serve,
        port=port if port is not None else settings.port,
        verbose=verbose,
    )
