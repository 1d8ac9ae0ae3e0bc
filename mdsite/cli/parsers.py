"""CLI argument parsers and validators."""

from __future__ import annotations

import typer


def parse_port(value: str) -> int:
    """Parse a TCP port number (0 picks a free port)."""
    try:
        port = int(value, 10)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid port: {value!r}") from e
    if not 0 <= port <= 65535:
        raise typer.BadParameter(f"Port out of range (0-65535): {port}")
    return port
