"""Unit tests for rendering file I/O helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from mdsite.core.errors import OutputDirError, OutputWriteError, SourceReadError
from mdsite.rendering.io import atomic_write_text, ensure_directory, read_source


@pytest.mark.unit
class TestEnsureDirectory:
    def test_creates_parents(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "public"

        ensure_directory(target)

        assert target.is_dir()

    def test_existing_directory_is_fine(self, tmp_path: Path) -> None:
        ensure_directory(tmp_path)

        assert tmp_path.is_dir()

    def test_file_in_the_way(self, tmp_path: Path) -> None:
        blocker = tmp_path / "public"
        blocker.write_text("not a directory", encoding="utf-8")

        with pytest.raises(OutputDirError, match="Unable to make directory"):
            ensure_directory(blocker)


@pytest.mark.unit
class TestAtomicWriteText:
    def test_creates_file(self, tmp_path: Path) -> None:
        target = tmp_path / "page.html"

        atomic_write_text(target, "<p>hi</p>\n")

        assert target.read_text(encoding="utf-8") == "<p>hi</p>\n"

    def test_replaces_file_without_leftovers(self, tmp_path: Path) -> None:
        target = tmp_path / "page.html"
        target.write_text("old content that is longer", encoding="utf-8")

        atomic_write_text(target, "new")

        assert target.read_text(encoding="utf-8") == "new"
        assert [p.name for p in tmp_path.iterdir()] == ["page.html"]

    def test_missing_directory_fails(self, tmp_path: Path) -> None:
        target = tmp_path / "missing" / "page.html"

        with pytest.raises(OutputWriteError) as exc_info:
            atomic_write_text(target, "text")

        assert exc_info.value.path == target


@pytest.mark.unit
def test_read_source_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SourceReadError):
        read_source(tmp_path / "gone.md")
