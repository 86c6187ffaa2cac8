# -*- coding: utf-8 -*-
"""
Language Editor Translation Manager

Handles the translation data behind the editor:
- Loading and saving language files
- Plain text export/import
- Merging new phrases from other files
- Edit tracking (modified flag, window title)

Every failure is turned into a message tagged with the operation name,
emitted on ``execution_error`` and returned in the OperationResult.
Nothing raises into the caller's event loop.
"""

import os
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QObject, Signal

import codec
from core import phrase_merge, phrase_navigation, text_exchange
from langedit_exceptions import DocumentParseError, LangEditError
from langedit_logger import get_logger
from locales import tr
from models.operation_result import OperationResult
from models.phrase_store import PhraseStore

logger = get_logger("controllers.translation")

PathLike = Union[str, Path]

# Operation tags prefix every error message. They are not translated, only
# the cause after the colon follows the UI language.
TAG_LOADING = "Loading language file"
TAG_SAVING = "Saving language file"
TAG_PARSING = "Parsing language file"
TAG_IMPORTING = "Importing language file"
TAG_ADD_PHRASES = "Add new phrases"
TAG_EXPORTING = "Exporting phrases"
TAG_EDITING = "Editing phrase"


class TranslationManager(QObject):
    """
    Owner of the current PhraseStore and its source file.

    Signals:
        execution_error(str): Emitted with "<operation tag>: <cause>". The tag is
            always English (TAG_* constants); the cause is localized
        translation_loaded(str): Emitted with the path of a loaded file
        translation_saved(str): Emitted with the path a language file was saved to
        translation_changed(): Emitted after the store was modified in place
    """

    execution_error = Signal(str)
    translation_loaded = Signal(str)
    translation_saved = Signal(str)
    translation_changed = Signal()

    def __init__(self, store: Optional[PhraseStore] = None, file_path: Optional[str] = None):
        super().__init__()
        self._store = store if store is not None else PhraseStore()
        self._file_path: Optional[str] = file_path
        self._is_modified = False

        logger.debug("TranslationManager initialized")

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def store(self) -> PhraseStore:
        return self._store

    @property
    def file_path(self) -> Optional[str]:
        """Path of the last loaded language file."""
        return self._file_path

    @property
    def is_modified(self) -> bool:
        return self._is_modified

    @property
    def display_name(self) -> str:
        """File name without extension, or an empty string when nothing is loaded."""
        if not self._file_path:
            return ""
        return Path(self._file_path).stem

    @property
    def display_title(self) -> str:
        title = tr("window_title")
        if self._file_path:
            title += f" - {self.display_name}"
        if self._is_modified:
            title += "*"
        return title

    # =========================================================================
    # ERROR CHANNEL
    # =========================================================================

    def _report(self, tag: str, cause: str) -> str:
        message = f"{tag}: {cause}"
        logger.error(message)
        self.execution_error.emit(message)
        return message

    def _fail(self, tag: str, cause: str, value=None) -> OperationResult:
        return OperationResult.failed(self._report(tag, cause), value)

    def _mark_modified(self):
        self._is_modified = True
        self.translation_changed.emit()

    # =========================================================================
    # LOAD / SAVE
    # =========================================================================

    def load_translation(self, path: PathLike) -> OperationResult:
        """
        Load a language file and make it the current translation.

        A file that cannot be read keeps the previous translation. A file with
        a broken structure replaces it with whatever could be parsed.

        Returns:
            OperationResult whose value is the new PhraseStore
        """
        try:
            document = codec.read_document(path)
        except LangEditError as e:
            return self._fail(TAG_LOADING, e.message)

        result = self._parse(document)
        self._store = result.value
        self._file_path = str(path)
        self._is_modified = False

        logger.info(f"Loaded {path}: {self._store.group_count} groups, {self._store.phrase_count} phrases")
        self.translation_loaded.emit(self._file_path)
        return result

    def _parse(self, document) -> OperationResult:
        try:
            return OperationResult.ok(codec.parse(document))
        except DocumentParseError as e:
            return self._fail(TAG_PARSING, e.message, e.partial_store)

    def create_lang_file(self, store: Optional[PhraseStore] = None):
        """Language document for ``store`` (the current one by default)."""
        return codec.serialize(self._store if store is None else store)

    def create_english_file(self, store: Optional[PhraseStore] = None):
        """Template document whose alternatives all equal the English text."""
        return codec.serialize_english_only(self._store if store is None else store)

    def save_document(self, document, path: PathLike) -> OperationResult:
        """Write an already built document to ``path``."""
        try:
            codec.write_document(document, path)
        except LangEditError as e:
            return self._fail(TAG_SAVING, e.message)

        logger.info(f"Saved language file: {path}")
        self.translation_saved.emit(str(path))
        return OperationResult.ok(str(path))

    def save_translation(self, path: Optional[PathLike] = None) -> OperationResult:
        """
        Serialize the current translation and save it.

        Args:
            path: Target file, or None for the current file path

        Returns:
            OperationResult whose value is the written path
        """
        target = str(path) if path is not None else self._file_path
        if not target:
            return self._fail(TAG_SAVING, tr("cause_no_file_path"))

        try:
            document = self.create_lang_file()
        except ValueError as e:
            return self._fail(TAG_SAVING, str(e))

        result = self.save_document(document, target)
        if result and self._file_path and os.path.abspath(target) == os.path.abspath(self._file_path):
            self._is_modified = False
        return result

    def export_new_english_phrases(self, path: PathLike) -> OperationResult:
        """Save a fresh language file with every alternative set to English."""
        try:
            document = self.create_english_file()
        except ValueError as e:
            return self._fail(TAG_SAVING, str(e))
        return self.save_document(document, path)

    # =========================================================================
    # TEXT EXPORT / IMPORT
    # =========================================================================

    def export_english_phrases(self, path: PathLike) -> OperationResult:
        """Write every English phrase to a text file, one per line."""
        try:
            return OperationResult.ok(text_exchange.export_english(self._store, path))
        except LangEditError as e:
            return self._fail(TAG_EXPORTING, e.message)

    def export_alternative_phrases(self, path: PathLike) -> OperationResult:
        """Write every alternative phrase to a text file, one per line."""
        try:
            return OperationResult.ok(text_exchange.export_alternative(self._store, path))
        except LangEditError as e:
            return self._fail(TAG_EXPORTING, e.message)

    def import_alternative_text_file(self, path: PathLike) -> OperationResult:
        """
        Replace the alternatives by line position from a text file.

        See text_exchange.apply_alternatives() for the positional rule.
        """
        try:
            updated = text_exchange.import_alternative(self._store, path)
        except LangEditError as e:
            return self._fail(TAG_IMPORTING, e.message)

        self._mark_modified()
        return OperationResult.ok(updated)

    def import_new_phrases_from_text_file(self, path: PathLike, group: str) -> OperationResult:
        """
        Add the non-empty lines of a text file to ``group`` as new phrases.

        Returns:
            OperationResult whose value is the number of phrases added
        """
        try:
            added = text_exchange.import_new_phrases(self._store, path, group)
        except LangEditError as e:
            return self._fail(TAG_ADD_PHRASES, e.message)

        if added:
            self._mark_modified()
        return OperationResult.ok(added)

    # =========================================================================
    # MERGE
    # =========================================================================

    def import_new_phrases_from_lang_file(self, path: PathLike) -> OperationResult:
        """
        Add phrases of another language file that are missing here.

        Returns:
            OperationResult whose value tells whether anything was added
        """
        try:
            document = codec.read_document(path)
        except LangEditError as e:
            return self._fail(TAG_LOADING, e.message, False)

        parsed = self._parse(document)
        changed = phrase_merge.merge_new_phrases(self._store, parsed.value)
        if changed:
            self._mark_modified()

        if not parsed:
            return OperationResult.failed(parsed.error, changed)
        return OperationResult.ok(changed)

    # =========================================================================
    # EDITING / NAVIGATION
    # =========================================================================

    def set_alternative(self, group: str, eng: str, alt: str) -> OperationResult:
        """Change the alternative text of one phrase."""
        if not self._store.has_group(group):
            return self._fail(TAG_EDITING, tr("cause_unknown_group", group=group))
        if not self._store.has_phrase(group, eng):
            return self._fail(TAG_EDITING, tr("cause_unknown_phrase", group=group, phrase=eng))

        if self._store.get_alternative(group, eng) != alt:
            self._store.set_alternative(group, eng, alt)
            self._mark_modified()
        return OperationResult.ok()

    def untranslated_count(self, group: Optional[str] = None) -> int:
        """Untranslated pairs in ``group``, or in the whole translation; 0 for unknown groups."""
        if group is not None and not self._store.has_group(group):
            return 0
        return self._store.untranslated_count(group)

    def find_phrase(self, group: str, query: str, start: int = -1) -> Optional[int]:
        if not self._store.has_group(group):
            return None
        return phrase_navigation.find_phrase(self._store.get_group(group), query, start)

    def next_untranslated(self, group: str, start: int = -1) -> Optional[int]:
        if not self._store.has_group(group):
            return None
        return phrase_navigation.next_untranslated(self._store.get_group(group), start)

    def __repr__(self) -> str:
        return f"TranslationManager(file={self.display_name or None}, {self._store!r})"
