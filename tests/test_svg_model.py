"""Tests for the SVG directory listing."""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from models.svg_model import ImageEntry, list_images

SVG = '<svg xmlns="http://www.w3.org/2000/svg" width="8" height="8"/>'


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(SVG, encoding="utf-8")
    return path


class TestListImages:
    def test_nonexistent_directory_is_empty(self, tmp_path):
        assert list_images(tmp_path / "missing") == []

    def test_empty_path_means_no_directory(self):
        assert list_images("") == []
        assert list_images(None) == []

    def test_file_path_is_not_a_directory(self, tmp_path):
        target = _touch(tmp_path / "a.svg")
        assert list_images(target) == []

    def test_only_lowercase_svg_files_at_top_level(self, tmp_path):
        _touch(tmp_path / "a.svg")
        _touch(tmp_path / "b.png")
        _touch(tmp_path / "c.SVG")
        _touch(tmp_path / "sub" / "d.svg")

        result = list_images(tmp_path)

        assert result == [ImageEntry(tmp_path / "a.svg")]

    def test_directory_named_like_svg_is_skipped(self, tmp_path):
        (tmp_path / "folder.svg").mkdir()
        _touch(tmp_path / "real.svg")

        assert [e.path.name for e in list_images(tmp_path)] == ["real.svg"]

    def test_accepts_string_paths(self, tmp_path):
        _touch(tmp_path / "x.svg")
        assert [e.label for e in list_images(str(tmp_path))] == ["x"]

    def test_results_are_in_natural_order(self, tmp_path):
        for name in ("icon10.svg", "icon2.svg", "icon1.svg"):
            _touch(tmp_path / name)

        labels = [e.label for e in list_images(tmp_path)]

        assert labels == ["icon1", "icon2", "icon10"]


class TestImageEntry:
    def test_label_drops_directory_and_extension(self):
        entry = ImageEntry(Path("/some/dir/logo.final.svg"))
        assert entry.label == "logo.final"

    def test_entries_are_immutable(self):
        entry = ImageEntry(Path("a.svg"))
        with pytest.raises(FrozenInstanceError):
            entry.path = Path("b.svg")
