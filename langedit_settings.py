"""
Language Editor Settings Module
Handles loading and saving of application settings.
"""

import json
import os
import langedit_config as config
from langedit_logger import get_logger
logger = get_logger("settings")


def _default_settings():
    return {
        "ui_language": config.DEFAULT_UI_LANGUAGE,
        "last_directory": None,
        "recent_files": [],
    }


def load_settings():
    """Load settings from JSON file, or return defaults if not found."""

    settings_file = config.SETTINGS_FILE_PATH
    default_settings = _default_settings()

    if not settings_file.is_file():
        logger.info(f"Settings file not found ({settings_file}). Using defaults.")
        return default_settings

    try:
        logger.debug(f"Loading settings: {settings_file}")
        with settings_file.open('r', encoding='utf-8') as f:
            loaded_data = json.load(f)
    except json.JSONDecodeError:
        logger.error(f"Settings file ({settings_file}) is corrupt (invalid JSON). Using defaults.")
        return default_settings
    except OSError as e:
        logger.error(f"Error reading settings ({settings_file}): {e}. Using defaults.")
        return default_settings

    if not isinstance(loaded_data, dict):
        logger.warning("Settings file format is invalid (not a dict). Using defaults.")
        return default_settings

    settings = default_settings.copy()
    settings.update(loaded_data)

    if settings.get("ui_language") not in ["en", "tr"]:
        logger.warning(f"Invalid 'ui_language' value ({settings.get('ui_language')}). Using default.")
        settings["ui_language"] = config.DEFAULT_UI_LANGUAGE

    last_dir = settings.get("last_directory")
    if last_dir is not None and not isinstance(last_dir, str):
        logger.warning("Invalid 'last_directory' value. Using default.")
        settings["last_directory"] = None

    recent = settings.get("recent_files")
    if not isinstance(recent, list):
        logger.warning("Invalid 'recent_files' value. Using default.")
        settings["recent_files"] = []
    else:
        settings["recent_files"] = [p for p in recent if isinstance(p, str)][:config.MAX_RECENT_FILES]

    logger.debug("Settings loaded.")
    return settings


def save_settings(settings_data):
    """Save settings to JSON file."""

    settings_file = config.SETTINGS_FILE_PATH
    try:
        logger.debug(f"Saving settings: {settings_file}")
        settings_file.parent.mkdir(parents=True, exist_ok=True)

        with settings_file.open('w', encoding='utf-8') as f:
            json.dump(settings_data, f, indent=4, ensure_ascii=False)
        logger.info("Settings saved.")
        return True
    except (OSError, TypeError) as e:
        logger.critical(f"Could not save settings ({settings_file}): {e}")
        return False


def remember_recent_file(settings_data, path):
    """Move ``path`` to the front of the recent files list and remember its folder."""
    path = os.path.abspath(path)
    recent = [p for p in settings_data.get("recent_files", []) if p != path]
    recent.insert(0, path)
    settings_data["recent_files"] = recent[:config.MAX_RECENT_FILES]
    settings_data["last_directory"] = os.path.dirname(path)
    return settings_data


logger.debug("langedit_settings.py loaded")
