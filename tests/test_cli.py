"""
Tests for the command-line interface.
"""
import json
from pathlib import Path

from pagebuilder.__main__ import main
from pagebuilder.model.elements import FeatureConfig
from pagebuilder.model.io import IOManager


def _project(tmp_path: Path, document) -> Path:
    path = tmp_path / "page.json"
    IOManager.save_project(document, FeatureConfig(use_rtk_query=True), str(path))
    return path


def test_render_markup_to_stdout(tmp_path, capsys, button):
    assert main(["render", str(_project(tmp_path, (button,)))]) == 0
    out = capsys.readouterr().out
    assert "left:10px;top:20px;width:80px;height:30px;" in out


def test_render_json_keeps_config(tmp_path, capsys, button):
    assert main(["render", str(_project(tmp_path, (button,))), "--format", "json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["config"] == {"useRouter": False, "useRTKQuery": True}


def test_render_to_output_dir(tmp_path, capsys, button):
    out_dir = tmp_path / "export"
    assert main(["render", str(_project(tmp_path, (button,))), "-f", "typed-source", "-o", str(out_dir)]) == 0
    written = out_dir / "my-page.tsx"
    assert capsys.readouterr().out.strip().endswith("my-page.tsx")
    assert "createApi()" in written.read_text(encoding="utf-8")


def test_render_missing_project_then_error_code(tmp_path, capsys):
    assert main(["render", str(tmp_path / "missing.json")]) == 1
    assert "error:" in capsys.readouterr().err


def test_templates_lists_catalog(capsys):
    assert main(["templates"]) == 0
    out = capsys.readouterr().out
    assert "Landing Page" in out
    assert "Portfolio" in out


def test_render_with_log_file_then_records_written(tmp_path, capsys, button):
    log_file = tmp_path / "pagebuilder.log"
    assert main(["-v", "--log-file", str(log_file), "render", str(_project(tmp_path, (button,)))]) == 0
    assert "left:10px" in capsys.readouterr().out
    assert "pagebuilder" in log_file.read_text(encoding="utf-8")
