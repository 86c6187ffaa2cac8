import os
from pathlib import Path

VERSION = "1.2.0"
APP_NAME = "Language Editor"
DEFAULT_UI_LANGUAGE = "en"  # Supported: "en" (English), "tr" (Turkish)

# Language file (XML) layout
ROOT_TAG = "groups"
PHRASE_TAG = "phrase"
ENG_TAG = "eng"
ALT_TAG = "alt"
XML_ENCODING = "utf-8"

# Plain text import/export
TEXT_NEWLINE = os.linesep
TEXT_WRITE_ENCODING = "utf-8"
TEXT_READ_ENCODING = "utf-8-sig"  # tolerate a BOM written by other editors

SETTINGS_DIR = Path.home() / ".langedit"
SETTINGS_FILE_PATH = SETTINGS_DIR / "settings.json"

MAX_RECENT_FILES = 10

__all__ = [
    "VERSION", "APP_NAME", "DEFAULT_UI_LANGUAGE",
    "ROOT_TAG", "PHRASE_TAG", "ENG_TAG", "ALT_TAG", "XML_ENCODING",
    "TEXT_NEWLINE", "TEXT_WRITE_ENCODING", "TEXT_READ_ENCODING",
    "SETTINGS_DIR", "SETTINGS_FILE_PATH", "MAX_RECENT_FILES",
]

# Import logger at the end to avoid circular imports
from langedit_logger import get_logger
_logger = get_logger("config")
_logger.debug("langedit_config.py loaded")
