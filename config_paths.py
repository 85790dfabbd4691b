import json
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "checkit")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "checkit.log")

# default settings
SEED_ITEM_DEFAULT = "New item"
THEME_DEFAULT = {}


def load_config():
    cfg = {
        "SEED_ITEM": SEED_ITEM_DEFAULT,
        "THEME": dict(THEME_DEFAULT),
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return cfg

    if not isinstance(data, dict):
        return cfg

    seed = data.get("seed_item")
    if isinstance(seed, str) and seed.strip():
        cfg["SEED_ITEM"] = seed.strip()

    theme = data.get("theme")
    if isinstance(theme, dict):
        cfg["THEME"] = {
            key: value
            for key, value in theme.items()
            if isinstance(key, str) and isinstance(value, str)
        }

    return cfg
