import json
import tempfile
from pathlib import Path

import config_paths


def test_load_config_defaults_without_json(monkeypatch):
    monkeypatch.delenv("GRIDFOCUS_STRICT", raising=False)
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "gridfocus"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        # point module paths to temp
        orig_dir = config_paths.CONFIG_DIR
        orig_json = config_paths.CONFIG_JSON
        try:
            config_paths.CONFIG_DIR = str(cfg_dir)
            config_paths.CONFIG_JSON = str(cfg_dir / "config.json")
            cfg = config_paths.load_config()
            assert cfg["VERTICAL_BAR"] is False
            assert cfg["RTL"] is False
            assert cfg["WORKSPACE_GRID"] == (4, 4)
            assert cfg["DOCK_COUNT"] == 5
            assert cfg["DOCK_ALL_ITEMS_RANK"] == 2
            assert cfg["SOUND"] == "bell"
            assert cfg["STRICT_LAYOUT"] is False
            assert cfg["LOG_LEVEL"] == "WARNING"
        finally:
            config_paths.CONFIG_DIR = orig_dir
            config_paths.CONFIG_JSON = orig_json


def test_load_config_reads_json_overrides(monkeypatch):
    monkeypatch.delenv("GRIDFOCUS_STRICT", raising=False)
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "gridfocus"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        cfg_path = cfg_dir / "config.json"
        cfg_path.write_text(
            json.dumps(
                {
                    "layout": {"vertical_bar": True, "rtl": True},
                    "workspace": {"count_x": 5, "count_y": 6},
                    "all_apps": {"count_x": 0, "count_y": 4},
                    "dock": {"count": 4, "all_items_rank": 7},
                    "sound": "off",
                    "strict_layout": True,
                    "log_level": "debug",
                }
            )
        )

        orig_dir = config_paths.CONFIG_DIR
        orig_json = config_paths.CONFIG_JSON
        try:
            config_paths.CONFIG_DIR = str(cfg_dir)
            config_paths.CONFIG_JSON = str(cfg_path)
            cfg = config_paths.load_config()
            assert cfg["VERTICAL_BAR"] is True
            assert cfg["RTL"] is True
            assert cfg["WORKSPACE_GRID"] == (5, 6)
            # invalid grid falls back to the default
            assert cfg["ALL_APPS_GRID"] == (5, 4)
            assert cfg["DOCK_COUNT"] == 4
            assert cfg["DOCK_ALL_ITEMS_RANK"] == 2
            assert cfg["SOUND"] == "off"
            assert cfg["STRICT_LAYOUT"] is True
            assert cfg["LOG_LEVEL"] == "DEBUG"
        finally:
            config_paths.CONFIG_DIR = orig_dir
            config_paths.CONFIG_JSON = orig_json


def test_malformed_json_keeps_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("GRIDFOCUS_STRICT", raising=False)
    cfg_path = tmp_path / "config.json"
    cfg_path.write_text("{not json")
    monkeypatch.setattr(config_paths, "CONFIG_JSON", str(cfg_path))
    cfg = config_paths.load_config()
    assert cfg["WORKSPACE_GRID"] == (4, 4)


def test_strict_env_overrides_json(tmp_path, monkeypatch):
    cfg_path = tmp_path / "config.json"
    cfg_path.write_text(json.dumps({"strict_layout": True}))
    monkeypatch.setattr(config_paths, "CONFIG_JSON", str(cfg_path))
    monkeypatch.setenv("GRIDFOCUS_STRICT", "0")
    assert config_paths.load_config()["STRICT_LAYOUT"] is False
    monkeypatch.setenv("GRIDFOCUS_STRICT", "1")
    assert config_paths.load_config()["STRICT_LAYOUT"] is True
