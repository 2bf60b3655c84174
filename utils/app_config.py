"""User preferences read before the window is built.

Config lives in ~/.dybudget/config.json, apart from the budget data file,
which always sits in the working directory.
"""
import json
import logging
import os
from pathlib import Path

from utils.constants import APPEARANCE_MODES, DEFAULT_APPEARANCE_MODE

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".dybudget"
CONFIG_FILE = CONFIG_DIR / "config.json"


def load_config(config_file: Path | None = None) -> dict:
    """Returns {} on missing or corrupt file; never raises."""
    path = config_file or CONFIG_FILE
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: dict, config_file: Path | None = None) -> None:
    """Creates the config dir if needed; atomic write via .tmp + os.replace()."""
    path = config_file or CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        os.replace(tmp, path)
    except OSError as e:
        logger.error("Could not save config %s: %s", path, e)
        tmp.unlink(missing_ok=True)


def get_appearance_mode(config_file: Path | None = None) -> str:
    """Return config["appearance_mode"], falling back to the default for unknown values."""
    mode = load_config(config_file).get("appearance_mode", DEFAULT_APPEARANCE_MODE)
    return mode if mode in APPEARANCE_MODES else DEFAULT_APPEARANCE_MODE


def set_appearance_mode(mode: str, config_file: Path | None = None) -> None:
    if mode not in APPEARANCE_MODES:
        raise ValueError(f"Invalid appearance mode: {mode}")
    config = load_config(config_file)
    config["appearance_mode"] = mode
    save_config(config, config_file)
