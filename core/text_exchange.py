# -*- coding: utf-8 -*-
"""
Plain text import/export of phrase lists.

One phrase per line, separated by the platform newline, no escaping.
Line order follows the store: group by group, phrase by phrase.
"""

from pathlib import Path
from typing import List, Union

import langedit_config as config
from langedit_enums import PhraseColumn
from langedit_exceptions import FileOperationError, PhraseLookupError, PositionalImportError
from langedit_logger import get_logger
from locales import tr
from models.phrase_store import PhraseStore

logger = get_logger("core.text_exchange")

PathLike = Union[str, Path]


# =============================================================================
# FILE HELPERS
# =============================================================================

def read_text_lines(path: PathLike, skip_empty: bool = False) -> List[str]:
    """
    Read a text file and split it on the platform newline.

    Lines are not trimmed. A file ending with a newline yields a trailing
    empty entry unless ``skip_empty`` is set.

    Raises:
        FileOperationError: if the file cannot be read or decoded
    """
    try:
        with open(path, 'r', encoding=config.TEXT_READ_ENCODING, newline='') as f:
            text = f.read()
    except OSError as e:
        raise FileOperationError(e.strerror or str(e), file_path=str(path), operation="read") from e
    except UnicodeDecodeError as e:
        raise FileOperationError(str(e), file_path=str(path), operation="read") from e

    lines = text.split(config.TEXT_NEWLINE)
    if skip_empty:
        lines = [line for line in lines if line]
    return lines


def write_text_lines(path: PathLike, lines: List[str]):
    """
    Write lines, each terminated by the platform newline.

    Raises:
        FileOperationError: if the file cannot be written
    """
    text = "".join(line + config.TEXT_NEWLINE for line in lines)
    try:
        with open(path, 'w', encoding=config.TEXT_WRITE_ENCODING, newline='') as f:
            f.write(text)
    except OSError as e:
        raise FileOperationError(e.strerror or str(e), file_path=str(path), operation="write") from e


# =============================================================================
# EXPORT
# =============================================================================

def collect_phrases(store: PhraseStore, column: PhraseColumn) -> List[str]:
    """Flatten one side of every pair in store order."""
    if column == PhraseColumn.ENGLISH:
        return [eng for _, eng, _ in store.iter_phrases()]
    return [alt for _, _, alt in store.iter_phrases()]


def export_phrases(store: PhraseStore, path: PathLike, column: PhraseColumn) -> int:
    """
    Write one side of every pair to a text file.

    Returns:
        Number of lines written
    """
    lines = collect_phrases(store, column)
    write_text_lines(path, lines)
    logger.info(f"Exported {len(lines)} {column.name.lower()} phrases to {path}")
    return len(lines)


def export_english(store: PhraseStore, path: PathLike) -> int:
    return export_phrases(store, path, PhraseColumn.ENGLISH)


def export_alternative(store: PhraseStore, path: PathLike) -> int:
    return export_phrases(store, path, PhraseColumn.ALTERNATIVE)


# =============================================================================
# IMPORT
# =============================================================================

def apply_alternatives(store: PhraseStore, lines: List[str]) -> int:
    """
    Assign alternatives by position: the n-th line goes to the n-th phrase
    of the flattened store. Extra lines are ignored.

    Reordering groups or phrases between export and import misassigns
    translations; nothing here can detect that.

    Returns:
        Number of phrases updated

    Raises:
        PositionalImportError: if there are fewer lines than phrases. The
            store is not modified in that case.
    """
    phrase_count = store.phrase_count
    if len(lines) < phrase_count:
        raise PositionalImportError(
            tr("cause_too_few_lines", lines=len(lines), phrases=phrase_count),
            line_count=len(lines),
            phrase_count=phrase_count,
        )

    position = 0
    for group, phrases in store.groups():
        for eng in list(phrases):
            store.set_alternative(group, eng, lines[position])
            position += 1

    if len(lines) > phrase_count:
        logger.debug(f"Ignored {len(lines) - phrase_count} extra lines")
    return position


def import_alternative(store: PhraseStore, path: PathLike) -> int:
    """Read a text file and apply it with apply_alternatives()."""
    lines = read_text_lines(path)
    updated = apply_alternatives(store, lines)
    logger.info(f"Imported {updated} alternative phrases from {path}")
    return updated


def add_new_phrases(store: PhraseStore, group: str, lines: List[str]) -> int:
    """
    Append every line that is not yet an English phrase of ``group``,
    seeding its alternative with the English text.

    Returns:
        Number of phrases added

    Raises:
        PhraseLookupError: if the group does not exist
    """
    if not store.has_group(group):
        raise PhraseLookupError(tr("cause_unknown_group", group=group), group=group)

    added = 0
    for line in lines:
        if line and store.add_phrase(group, line, line):
            added += 1
    return added


def import_new_phrases(store: PhraseStore, path: PathLike, group: str) -> int:
    """Read non-empty lines from a text file and add them with add_new_phrases()."""
    lines = read_text_lines(path, skip_empty=True)
    added = add_new_phrases(store, group, lines)
    logger.info(f"Added {added} new phrases to group '{group}' from {path}")
    return added
