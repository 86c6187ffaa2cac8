# -*- coding: utf-8 -*-
"""
Merging phrases from another language file into the current store.
"""

from langedit_logger import get_logger
from models.phrase_store import PhraseStore

logger = get_logger("core.phrase_merge")


def merge_new_phrases(target: PhraseStore, source: PhraseStore) -> bool:
    """
    Copy every (group, English) pair of ``source`` that ``target`` lacks.

    Missing groups are appended to ``target``; new pairs get their English
    text as alternative. Existing pairs are never overwritten.

    Returns:
        True if at least one phrase was added. A group added without
        phrases does not count.
    """
    added_phrases = 0

    for group, phrases in source.groups():
        target.add_group(group)
        for eng in phrases:
            if target.add_phrase(group, eng, eng):
                added_phrases += 1

    logger.debug(f"Merge added {added_phrases} phrases")
    return added_phrases > 0
