from __future__ import annotations

from pathlib import Path
import sys

test_dir = Path(__file__).resolve().parent
project_root = test_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from glossgen.config import get_settings, reload_settings  # noqa: E402


def test_settings_defaults(monkeypatch):
    for key in ("GLOSSGEN_INPUT", "GLOSSGEN_OUTPUT_DIR", "GLOSSGEN_ENCODING", "GLOSSGEN_INDEX_TITLE", "GLOSSGEN_STRICT"):
        monkeypatch.delenv(key, raising=False)
    reload_settings()
    try:
        build = get_settings().build
        assert build.input_path is None
        assert build.output_dir is None
        assert build.encoding == "utf-8"
        assert build.index_title == "Glossary"
        assert build.strict is False
    finally:
        reload_settings()


def test_settings_from_env(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("GLOSSGEN_INPUT", str(tmp_path / "in.txt"))
    monkeypatch.setenv("GLOSSGEN_OUTPUT_DIR", str(tmp_path / "out"))
    monkeypatch.setenv("GLOSSGEN_INDEX_TITLE", "Terms")
    monkeypatch.setenv("GLOSSGEN_STRICT", "yes")
    reload_settings()
    try:
        build = get_settings().build
        assert build.input_path == tmp_path / "in.txt"
        assert build.output_dir == tmp_path / "out"
        assert build.index_title == "Terms"
        assert build.strict is True
    finally:
        reload_settings()
