import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "gridfocus")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "gridfocus.log")

# default settings
VERTICAL_BAR_DEFAULT = False
RTL_DEFAULT = False
WORKSPACE_GRID_DEFAULT = (4, 4)
ALL_APPS_GRID_DEFAULT = (5, 4)
FOLDER_GRID_DEFAULT = (3, 3)
DOCK_COUNT_DEFAULT = 5
DOCK_ALL_ITEMS_RANK_DEFAULT = 2
SOUND_DEFAULT = "bell"
STRICT_LAYOUT_DEFAULT = False
LOG_LEVEL_DEFAULT = "WARNING"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def _positive_int(value):
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def _grid(section, default):
    if not isinstance(section, dict):
        return default
    count_x = _positive_int(section.get("count_x"))
    count_y = _positive_int(section.get("count_y"))
    if count_x is None or count_y is None:
        return default
    return (count_x, count_y)


def _env_flag(name):
    value = os.environ.get(name)
    if value is None:
        return None
    return value.strip().lower() in {"1", "true", "yes", "on"}


def load_config():
    cfg = {
        "VERTICAL_BAR": VERTICAL_BAR_DEFAULT,
        "RTL": RTL_DEFAULT,
        "WORKSPACE_GRID": WORKSPACE_GRID_DEFAULT,
        "ALL_APPS_GRID": ALL_APPS_GRID_DEFAULT,
        "FOLDER_GRID": FOLDER_GRID_DEFAULT,
        "DOCK_COUNT": DOCK_COUNT_DEFAULT,
        "DOCK_ALL_ITEMS_RANK": DOCK_ALL_ITEMS_RANK_DEFAULT,
        "SOUND": SOUND_DEFAULT,
        "STRICT_LAYOUT": STRICT_LAYOUT_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
    }

    if os.path.exists(CONFIG_JSON):
        try:
            import json

            with open(CONFIG_JSON, "r", encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict):
                layout = data.get("layout")
                if isinstance(layout, dict):
                    if isinstance(layout.get("vertical_bar"), bool):
                        cfg["VERTICAL_BAR"] = layout["vertical_bar"]
                    if isinstance(layout.get("rtl"), bool):
                        cfg["RTL"] = layout["rtl"]

                cfg["WORKSPACE_GRID"] = _grid(data.get("workspace"), cfg["WORKSPACE_GRID"])
                cfg["ALL_APPS_GRID"] = _grid(data.get("all_apps"), cfg["ALL_APPS_GRID"])
                cfg["FOLDER_GRID"] = _grid(data.get("folder"), cfg["FOLDER_GRID"])

                dock = data.get("dock")
                if isinstance(dock, dict):
                    count = _positive_int(dock.get("count"))
                    rank = dock.get("all_items_rank")
                    if count is not None:
                        cfg["DOCK_COUNT"] = count
                    if isinstance(rank, int) and not isinstance(rank, bool) and rank >= 0:
                        cfg["DOCK_ALL_ITEMS_RANK"] = rank
                    if cfg["DOCK_ALL_ITEMS_RANK"] >= cfg["DOCK_COUNT"]:
                        cfg["DOCK_ALL_ITEMS_RANK"] = cfg["DOCK_COUNT"] // 2

                sound = data.get("sound")
                if sound in {"bell", "off"}:
                    cfg["SOUND"] = sound

                if isinstance(data.get("strict_layout"), bool):
                    cfg["STRICT_LAYOUT"] = data["strict_layout"]

                level = data.get("log_level")
                if isinstance(level, str) and level.upper() in _LOG_LEVELS:
                    cfg["LOG_LEVEL"] = level.upper()
        except Exception:
            pass

    strict_env = _env_flag("GRIDFOCUS_STRICT")
    if strict_env is not None:
        cfg["STRICT_LAYOUT"] = strict_env

    return cfg
