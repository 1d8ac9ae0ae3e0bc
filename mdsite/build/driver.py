"""Batch driver: render every markdown source of a directory."""

from __future__ import annotations

import logging

from ..core.models import BuildReport, SiteConfig, Skipped
from ..rendering.engine import TemplateSet, render_document
from ..rendering.io import ensure_directory
from .discovery import discover_sources

logger = logging.getLogger(__name__)


def build_site(config: SiteConfig) -> BuildReport:
    """Render all markdown sources of ``config.input_dir``.

    Entries that cannot be inspected are recorded in the report and skipped.
    Any :class:`~mdsite.core.errors.SiteError` raised while loading templates,
    creating the output directory, or rendering a document aborts the build.

    Args:
        config: Site configuration

    Returns:
        Report of the build
    """
    templates = TemplateSet.from_directory(config.template_dir)
    ensure_directory(config.out_dir)

    report = BuildReport()
    for entry in discover_sources(config.input_dir):
        report.found += 1
        if isinstance(entry, Skipped):
            logger.warning(f"Skipping {entry.path}: {entry.reason}")
            report.skipped.append(entry)
            continue
        output = render_document(entry, config.template_name, templates, config.out_dir)
        report.written.append(output)

    if report.found:
        logger.info(f"Rendered {len(report.written)} page(s) into {config.out_dir}")
    if report.skipped:
        logger.warning(f"Skipped {len(report.skipped)} unreadable entries")
    return report
