import json
import os
import sys
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from searchdesk.config import ConfigManager
from searchdesk.constants import DEFAULT_ENGINE_COMMAND, DEFAULT_PAGE_SIZE, ENGINE_ENV_VAR


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv(ENGINE_ENV_VAR, raising=False)
    cfg = ConfigManager(tmp_path)
    assert cfg.get_engine_command() == DEFAULT_ENGINE_COMMAND
    assert cfg.get_results_page_size() == DEFAULT_PAGE_SIZE
    assert cfg.get_theme() == "light"
    assert cfg.get_scan_on_startup()
    assert cfg.get_history() == []


def test_history_dedupes_and_caps(tmp_path):
    cfg = ConfigManager(tmp_path)
    for i in range(25):
        cfg.add_history(f"kw{i}")
    cfg.add_history("kw3")
    cfg.add_history("   ")
    history = cfg.get_history()
    assert history[0] == "kw3"
    assert history.count("kw3") == 1
    assert len(history) == 20


def test_persists_between_instances(tmp_path):
    cfg = ConfigManager(tmp_path)
    cfg.set_theme("dark")
    cfg.set_results_page_size(50)
    cfg.set_last_index_dir("/data")
    cfg2 = ConfigManager(tmp_path)
    assert cfg2.get_theme() == "dark"
    assert cfg2.get_results_page_size() == 50
    assert cfg2.get_last_index_dir() == "/data"


def test_invalid_page_size_ignored(tmp_path):
    cfg = ConfigManager(tmp_path)
    cfg.set_results_page_size(0)
    cfg.set_results_page_size("abc")
    assert cfg.get_results_page_size() == DEFAULT_PAGE_SIZE


def test_engine_command_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv(ENGINE_ENV_VAR, "my-engine --stdio")
    assert ConfigManager(tmp_path).get_engine_command() == ["my-engine", "--stdio"]


def test_engine_command_string_in_file(tmp_path, monkeypatch):
    monkeypatch.delenv(ENGINE_ENV_VAR, raising=False)
    (tmp_path / "config.json").write_text(json.dumps({"engine_command": "engine --fast"}), encoding="utf-8")
    assert ConfigManager(tmp_path).get_engine_command() == ["engine", "--fast"]


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    (tmp_path / "config.json").write_text("{not json", encoding="utf-8")
    cfg = ConfigManager(tmp_path)
    assert cfg.get_results_page_size() == DEFAULT_PAGE_SIZE
