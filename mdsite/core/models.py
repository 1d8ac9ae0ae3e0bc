"""Domain models for site configuration, documents and build results."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

UNTITLED = "Untitled"


class SiteConfig(BaseModel):
    """Immutable configuration for one build (and optional serve) run."""

    model_config = ConfigDict(frozen=True)

    input_dir: Path = Field(..., description="Markdown source directory")
    template_dir: Path = Field(..., description="Template directory")
    out_dir: Path = Field(..., description="HTML output directory")
    template_name: str = Field(..., description="Page template name")
    serve: bool = Field(default=False, description="Serve the output after building")
    port: int = Field(default=8080, ge=0, le=65535, description="Server port")
    verbose: bool = Field(default=False, description="Enable debug logging")


class Document(BaseModel):
    """A markdown source and the values derived from it."""

    source: Path = Field(..., description="Markdown source path")
    markdown: str = Field(..., description="Raw markdown text")
    title: str = Field(default=UNTITLED, description="Title from the first H1")
    html: str = Field(default="", description="Rendered HTML fragment")

    def context(self) -> dict[str, str]:
        """Return the render context handed to the page template."""
        return {"title": self.title, "content": self.html}


class Skipped(BaseModel):
    """A discovered entry that could not be inspected and was left out."""

    model_config = ConfigDict(frozen=True)

    path: Path
    reason: str


class BuildReport(BaseModel):
    """Outcome of a batch build."""

    found: int = Field(default=0, description="Matched entries, skipped ones included")
    written: list[Path] = Field(default_factory=list, description="Pages written")
    skipped: list[Skipped] = Field(default_factory=list, description="Entries left out")
