"""File I/O operations for rendering."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from ..core.errors import OutputDirError, OutputWriteError, SourceReadError


def ensure_directory(path: Path) -> None:
    """Create a directory and its parents if missing.

    Args:
        path: Directory to create

    Raises:
        OutputDirError: If the directory cannot be created
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirError(f"Unable to make directory {path}: {e}") from e


def read_source(path: Path) -> str:
    """Read a markdown source as UTF-8 text.

    Raises:
        SourceReadError: If the file is unreadable or not valid UTF-8
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(path, str(e)) from e


def atomic_write_text(path: Path, text: str, mode: int = 0o644) -> None:
    """Write text to a file atomically using a temporary file.

    An existing file at ``path`` is replaced in one step; a failed write
    leaves it untouched.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)

    Raises:
        OutputWriteError: If the file cannot be written
    """
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    except OSError as e:
        raise OutputWriteError(path, str(e)) from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
        os.chmod(path, mode)
    except OSError as e:
        raise OutputWriteError(path, str(e)) from e
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
