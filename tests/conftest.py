# -*- coding: utf-8 -*-
"""
Language Editor Test Fixtures

Shared fixtures for all tests.
"""

import pytest
import sys
import os
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


SAMPLE_XML = """<?xml version="1.0" encoding="utf-8"?>
<groups>
  <Menu>
    <phrase>
      <eng>File</eng>
      <alt>Dosya</alt>
    </phrase>
    <phrase>
      <eng>Open</eng>
      <alt>Open</alt>
    </phrase>
  </Menu>
  <Dialogs>
    <phrase>
      <eng>Cancel</eng>
      <alt></alt>
    </phrase>
  </Dialogs>
</groups>
"""


# =============================================================================
# ENVIRONMENT FIXTURES
# =============================================================================

@pytest.fixture(scope="session", autouse=True)
def qt_core_app():
    """Core application instance so Qt signals are delivered."""
    from PySide6.QtCore import QCoreApplication
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture(autouse=True)
def english_ui():
    """Messages are asserted in English."""
    import locales
    locales.set_language("en")
    yield
    locales.set_language("en")


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    """Point the settings file into a temp directory."""
    import langedit_config as config
    settings_file = tmp_path / "settings" / "settings.json"
    monkeypatch.setattr(config, "SETTINGS_FILE_PATH", settings_file)
    return settings_file


# =============================================================================
# MODEL FIXTURES
# =============================================================================

@pytest.fixture
def sample_data() -> dict:
    return {
        "Menu": {"File": "Dosya", "Open": "Open"},
        "Dialogs": {"Cancel": ""},
    }


@pytest.fixture
def sample_store(sample_data):
    from models.phrase_store import PhraseStore
    return PhraseStore(sample_data)


# =============================================================================
# CONTROLLER FIXTURES
# =============================================================================

@pytest.fixture
def manager():
    """TranslationManager that records its error messages in ``manager.errors``."""
    from controllers.translation_manager import TranslationManager
    m = TranslationManager()
    m.errors = []
    m.execution_error.connect(lambda message: m.errors.append(message))
    return m


# =============================================================================
# TEMP FILE FIXTURES
# =============================================================================

@pytest.fixture
def lang_file(tmp_path) -> Path:
    file_path = tmp_path / "turkish.xml"
    file_path.write_text(SAMPLE_XML, encoding="utf-8")
    return file_path


@pytest.fixture
def write_lines(tmp_path):
    """Write lines joined by the platform newline, return the path."""
    def _write(name, lines, trailing_newline=True):
        path = tmp_path / name
        text = os.linesep.join(lines)
        if trailing_newline and lines:
            text += os.linesep
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        return path
    return _write


@pytest.fixture
def read_raw(tmp_path):
    """Read a file back without newline translation."""
    def _read(path):
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    return _read
