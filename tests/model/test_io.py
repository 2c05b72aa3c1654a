"""
Unit Tests for project files and export downloads.
"""
from pathlib import Path

import pytest

from pagebuilder.export import ProjectFormatError
from pagebuilder.model.elements import FeatureConfig
from pagebuilder.model.io import IOManager


class TestProjectFiles:

    def test_save_then_load_restores_page(self, tmp_path: Path, mixed_document):
        path = tmp_path / "page.json"
        config = FeatureConfig(use_router=True)
        IOManager.save_project(mixed_document, config, str(path))
        assert IOManager.load_project(str(path)) == (mixed_document, config)

    def test_load_when_missing_then_file_not_found(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            IOManager.load_project(str(tmp_path / "nope.json"))

    def test_load_when_corrupt_then_format_error(self, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text("[1, 2", encoding="utf-8")
        with pytest.raises(ProjectFormatError):
            IOManager.load_project(str(path))


class TestExportFiles:

    @pytest.mark.parametrize("fmt,name", [
        ("markup", "my-page.html"),
        ("typed-source", "my-page.tsx"),
        ("json", "my-page.json"),
    ])
    def test_export_filename_then_extension_per_format(self, fmt, name):
        assert IOManager.export_filename(fmt) == name

    def test_export_to_file_then_rendered_text_written(self, tmp_path: Path, button, no_features):
        out_dir = tmp_path / "out"
        path = IOManager.export_to_file((button,), no_features, "markup", str(out_dir))
        assert Path(path) == out_dir / "my-page.html"
        assert "Click me" in Path(path).read_text(encoding="utf-8")
