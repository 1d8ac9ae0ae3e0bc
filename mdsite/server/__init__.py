"""Static file server for a generated site."""

from .app import SiteServer, create_app, resolve_request_path

__all__ = ["SiteServer", "create_app", "resolve_request_path"]
