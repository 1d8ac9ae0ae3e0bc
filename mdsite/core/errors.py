"""Error hierarchy for site generation and serving.

Every error raised by the library derives from :class:`SiteError`. The CLI
turns any of them into exit code 1; skippable discovery problems are not
errors and are reported as :class:`~mdsite.core.models.Skipped` records.
"""

from __future__ import annotations

from pathlib import Path


class SiteError(Exception):
    """Base class for fatal site generation errors."""


class TemplateSetError(SiteError):
    """Raised when a template of the template directory cannot be loaded."""


class TemplateRenderError(SiteError):
    """Raised when the page template cannot be rendered for a document."""


class OutputDirError(SiteError):
    """Raised when the output directory cannot be created."""


class ServerBindError(SiteError):
    """Raised when the file server cannot bind its listening socket."""


class SiteIOError(SiteError):
    """Raised when a file of the batch cannot be read or written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class SourceReadError(SiteIOError):
    """Raised when a markdown source cannot be read as UTF-8 text."""


class OutputWriteError(SiteIOError):
    """Raised when a rendered page cannot be written."""
