# -*- coding: utf-8 -*-
"""
Unit Tests for settings persistence and localization.
"""

import json

import langedit_config as config
import langedit_settings as settings_module
import locales


class TestSettings:
    """Tests for settings persistence."""

    def test_defaults_when_missing(self, isolated_settings):
        """Test defaults when no settings file exists."""
        settings = settings_module.load_settings()

        assert settings["ui_language"] == config.DEFAULT_UI_LANGUAGE
        assert settings["recent_files"] == []
        assert settings["last_directory"] is None

    def test_save_and_load(self, isolated_settings):
        """Test saving and loading settings."""
        data = {"ui_language": "tr", "last_directory": "/tmp", "recent_files": ["/tmp/a.xml"]}

        assert settings_module.save_settings(data) is True
        assert isolated_settings.is_file()
        assert settings_module.load_settings() == data

    def test_corrupt_file_gives_defaults(self, isolated_settings):
        """Test that an unreadable file falls back to defaults."""
        isolated_settings.parent.mkdir(parents=True)
        isolated_settings.write_text("{not json", encoding="utf-8")

        assert settings_module.load_settings()["ui_language"] == config.DEFAULT_UI_LANGUAGE

    def test_invalid_values_replaced(self, isolated_settings):
        """Test that invalid values are replaced by defaults."""
        isolated_settings.parent.mkdir(parents=True)
        isolated_settings.write_text(json.dumps({
            "ui_language": "xx",
            "last_directory": 42,
            "recent_files": "not a list",
        }), encoding="utf-8")

        settings = settings_module.load_settings()

        assert settings["ui_language"] == config.DEFAULT_UI_LANGUAGE
        assert settings["last_directory"] is None
        assert settings["recent_files"] == []

    def test_remember_recent_file(self, tmp_path):
        """Test recent file ordering without duplicates."""
        first, second = str(tmp_path / "a.xml"), str(tmp_path / "b.xml")
        data = {"recent_files": []}

        settings_module.remember_recent_file(data, first)
        settings_module.remember_recent_file(data, second)
        settings_module.remember_recent_file(data, first)

        assert data["recent_files"] == [first, second]
        assert data["last_directory"] == str(tmp_path)

    def test_recent_files_limited(self, tmp_path):
        """Test the recent file limit."""
        data = {"recent_files": []}
        for i in range(config.MAX_RECENT_FILES + 3):
            settings_module.remember_recent_file(data, str(tmp_path / f"{i}.xml"))

        assert len(data["recent_files"]) == config.MAX_RECENT_FILES
        assert data["recent_files"][0].endswith(f"{config.MAX_RECENT_FILES + 2}.xml")


class TestLocales:
    """Tests for tr() and language switching."""

    def test_unknown_key_returns_key(self):
        """Test that an unknown key is returned as is."""
        assert locales.tr("no_such_key") == "no_such_key"

    def test_format_parameters(self):
        """Test format parameters."""
        assert locales.tr("cause_unknown_group", group="Menu") == "group 'Menu' not found"

    def test_unsupported_language_ignored(self):
        """Test that an unsupported language code is ignored."""
        locales.set_language("xx")
        assert locales.tr("window_title") == "Language Editor"

    def test_turkish(self):
        """Test Turkish strings."""
        locales.set_language("tr")
        assert locales.tr("window_title") == "Dil Düzenleyici"
