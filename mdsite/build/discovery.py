"""Markdown source discovery."""

from __future__ import annotations

import fnmatch
import logging
import os
from collections.abc import Iterator
from pathlib import Path

from ..core.models import Skipped

logger = logging.getLogger(__name__)

SOURCE_GLOB = "*.md"


def discover_sources(input_dir: Path, pattern: str = SOURCE_GLOB) -> Iterator[Path | Skipped]:
    """Yield the entries of ``input_dir`` whose name matches ``pattern``.

    The listing is not recursive and keeps the order the filesystem returns.
    A matched entry that cannot be stat'ed, or an input directory that cannot
    be listed, is yielded as a :class:`Skipped` record instead of a path. A
    missing input directory yields nothing.

    Args:
        input_dir: Directory to list
        pattern: Case-sensitive file name pattern

    Yields:
        Matched paths, or skipped entries
    """
    try:
        scanner = os.scandir(input_dir)
    except (FileNotFoundError, NotADirectoryError):
        logger.debug(f"Input directory {input_dir} does not exist")
        return
    except OSError as e:
        yield Skipped(path=input_dir, reason=str(e))
        return

    with scanner:
        for entry in scanner:
            if not fnmatch.fnmatchcase(entry.name, pattern):
                continue
            path = Path(entry.path)
            try:
                entry.stat()
            except OSError as e:
                yield Skipped(path=path, reason=str(e))
                continue
            yield path
