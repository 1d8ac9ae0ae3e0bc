"""Batch build of a markdown directory."""

from .driver import build_site

__all__ = ["build_site"]
