# -*- coding: utf-8 -*-
"""
Language Editor Localization Module
Supports English and Turkish UI languages.
"""

from langedit_logger import get_logger

logger = get_logger("locales")

SUPPORTED_UI_LANGUAGES = {
    "en": "English",
    "tr": "Türkçe",
}

DEFAULT_UI_LANGUAGE = "en"
_current_language = DEFAULT_UI_LANGUAGE


def set_language(lang_code: str):
    """Set the current UI language."""
    global _current_language
    if lang_code in SUPPORTED_UI_LANGUAGES:
        _current_language = lang_code
        logger.debug(f"UI language set to: {lang_code}")
    else:
        logger.warning(f"Unsupported language code '{lang_code}'. Keeping '{_current_language}'.")


def tr(key: str, **kwargs) -> str:
    """
    Translate a key to the current language.

    Args:
        key: Translation key
        **kwargs: Format parameters for the translated string

    Returns:
        Translated string, or the key itself if not found
    """
    translations = TRANSLATIONS.get(_current_language, TRANSLATIONS["en"])
    text = translations.get(key, TRANSLATIONS["en"].get(key, key))

    if kwargs:
        try:
            text = text.format(**kwargs)
        except KeyError as e:
            logger.warning(f"Missing format key {e} for translation '{key}'")

    return text


# =============================================================================
# TRANSLATIONS DICTIONARY
# =============================================================================

TRANSLATIONS = {
    "en": {
        # Window
        "window_title": "Language Editor",

        # Causes
        "cause_no_file_path": "no file path",
        "cause_missing_root": "root element '{expected}' not found (found '{found}')",
        "cause_missing_child": "phrase in group '{group}' has no '{child}' element",
        "cause_duplicate_group": "group '{group}' appears more than once",
        "cause_too_few_lines": "the file has {lines} lines but the translation has {phrases} phrases",
        "cause_unknown_group": "group '{group}' not found",
        "cause_unknown_phrase": "phrase '{phrase}' not found in group '{group}'",

        # CLI
        "cli_description": "Edit two-level translation dictionaries stored as XML language files.",
        "cli_loaded": "{name}: {groups} groups, {phrases} phrases, {untranslated} not translated",
        "cli_group_line": "  {group}: {phrases} phrases, {untranslated} not translated",
        "cli_written": "Written: {path}",
        "cli_merged": "New phrases added from {path}",
        "cli_nothing_merged": "No new phrases in {path}",
    },
    "tr": {
        "window_title": "Dil Düzenleyici",

        "cause_no_file_path": "dosya yolu yok",
        "cause_missing_root": "kök öğe '{expected}' bulunamadı ('{found}' bulundu)",
        "cause_missing_child": "'{group}' grubundaki ifadede '{child}' öğesi yok",
        "cause_duplicate_group": "'{group}' grubu birden fazla kez geçiyor",
        "cause_too_few_lines": "dosyada {lines} satır var, çeviride {phrases} ifade var",
        "cause_unknown_group": "'{group}' grubu bulunamadı",
        "cause_unknown_phrase": "'{group}' grubunda '{phrase}' ifadesi bulunamadı",

        "cli_description": "XML dil dosyalarında saklanan iki seviyeli çeviri sözlüklerini düzenler.",
        "cli_loaded": "{name}: {groups} grup, {phrases} ifade, {untranslated} çevrilmemiş",
        "cli_group_line": "  {group}: {phrases} ifade, {untranslated} çevrilmemiş",
        "cli_written": "Yazıldı: {path}",
        "cli_merged": "{path} dosyasından yeni ifadeler eklendi",
        "cli_nothing_merged": "{path} dosyasında yeni ifade yok",
    },
}
