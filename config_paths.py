import json
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "revealgrid")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
DEBUG_LOG_PATH = os.path.join(CONFIG_DIR, "debug.log")

# default settings
MAX_COL_WIDTH_DEFAULT = 40
PLACEHOLDER_WIDTH_DEFAULT = 4
SHOW_KEY_HINTS_DEFAULT = True


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def _int_in_range(value, lower, upper):
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value < lower or value > upper:
        return None
    return value


def load_config():
    cfg = {
        "MAX_COL_WIDTH": MAX_COL_WIDTH_DEFAULT,
        "PLACEHOLDER_WIDTH": PLACEHOLDER_WIDTH_DEFAULT,
        "SHOW_KEY_HINTS": SHOW_KEY_HINTS_DEFAULT,
    }

    if os.path.exists(CONFIG_JSON):
        try:
            with open(CONFIG_JSON, "r", encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict):
                max_w = _int_in_range(data.get("max_col_width"), 3, 200)
                if max_w is not None:
                    cfg["MAX_COL_WIDTH"] = max_w
                placeholder_w = _int_in_range(data.get("placeholder_width"), 1, 40)
                if placeholder_w is not None:
                    cfg["PLACEHOLDER_WIDTH"] = placeholder_w
                hints = data.get("show_key_hints")
                if isinstance(hints, bool):
                    cfg["SHOW_KEY_HINTS"] = hints
        except (OSError, ValueError):
            pass

    return cfg
