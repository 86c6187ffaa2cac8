# -*- coding: utf-8 -*-
"""
Language Editor Phrase Store

In-memory translation dataset:
- Ordered groups, each an ordered mapping English phrase -> alternative phrase
- First-wins insertion for duplicate English phrases
- Flattened (group, English, alternative) iteration in display order
"""

from typing import Dict, Iterator, List, Optional, Tuple

from langedit_logger import get_logger

logger = get_logger("models.phrase_store")


def is_untranslated(eng: str, alt: str) -> bool:
    """
    A pair counts as untranslated when the alternative still equals the
    English text, or when it is empty while the English text is not.
    """
    return eng == alt or (not alt and bool(eng))


class PhraseStore:
    """
    Nested ordered mapping group -> (English phrase -> alternative phrase).

    Python dicts keep insertion order, which is the display and export order
    of both groups and phrases.
    """

    def __init__(self, data: Optional[Dict[str, Dict[str, str]]] = None):
        self._groups: Dict[str, Dict[str, str]] = {}
        if data:
            for group, phrases in data.items():
                self.add_group(group)
                for eng, alt in phrases.items():
                    self.add_phrase(group, eng, alt)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def group_names(self) -> List[str]:
        """Group names in store order."""
        return list(self._groups)

    @property
    def group_count(self) -> int:
        return len(self._groups)

    @property
    def phrase_count(self) -> int:
        """Total number of phrases across all groups."""
        return sum(len(phrases) for phrases in self._groups.values())

    @property
    def is_empty(self) -> bool:
        return not self._groups

    # =========================================================================
    # GROUPS
    # =========================================================================

    def has_group(self, group: str) -> bool:
        return group in self._groups

    def add_group(self, group: str) -> bool:
        """
        Add an empty group at the end of the store.

        Returns:
            True if the group was created, False if it already existed
        """
        if group in self._groups:
            return False
        self._groups[group] = {}
        return True

    def get_group(self, group: str) -> Dict[str, str]:
        """
        Get the live phrase mapping of a group.

        Raises:
            KeyError: if the group does not exist
        """
        return self._groups[group]

    def groups(self) -> Iterator[Tuple[str, Dict[str, str]]]:
        """Iterate (group name, phrases) in store order."""
        return iter(self._groups.items())

    # =========================================================================
    # PHRASES
    # =========================================================================

    def has_phrase(self, group: str, eng: str) -> bool:
        return group in self._groups and eng in self._groups[group]

    def add_phrase(self, group: str, eng: str, alt: str) -> bool:
        """
        Append a phrase pair to a group, creating the group if needed.

        An English phrase already present in the group is left untouched.

        Returns:
            True if the pair was inserted
        """
        phrases = self._groups.setdefault(group, {})
        if eng in phrases:
            return False
        phrases[eng] = alt
        return True

    def get_alternative(self, group: str, eng: str) -> str:
        return self._groups[group][eng]

    def set_alternative(self, group: str, eng: str, alt: str):
        """
        Replace the alternative text of an existing pair.

        Raises:
            KeyError: if the group or English phrase does not exist
        """
        phrases = self._groups[group]
        if eng not in phrases:
            raise KeyError(eng)
        phrases[eng] = alt

    def iter_phrases(self) -> Iterator[Tuple[str, str, str]]:
        """Iterate (group, English, alternative) over the whole store, group by group."""
        for group, phrases in self._groups.items():
            for eng, alt in phrases.items():
                yield group, eng, alt

    def untranslated_count(self, group: Optional[str] = None) -> int:
        """Count untranslated pairs in one group, or in the whole store."""
        if group is not None:
            return sum(1 for eng, alt in self._groups[group].items() if is_untranslated(eng, alt))
        return sum(1 for _, eng, alt in self.iter_phrases() if is_untranslated(eng, alt))

    # =========================================================================
    # CONVERSION
    # =========================================================================

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        """Deep copy as plain nested dicts."""
        return {group: dict(phrases) for group, phrases in self._groups.items()}

    def copy(self) -> 'PhraseStore':
        return PhraseStore(self.to_dict())

    # =========================================================================
    # DUNDER
    # =========================================================================

    def __contains__(self, group: str) -> bool:
        return group in self._groups

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PhraseStore):
            return NotImplemented
        # Order is part of the store's identity.
        return [(g, list(p.items())) for g, p in self._groups.items()] == \
            [(g, list(p.items())) for g, p in other._groups.items()]

    def __repr__(self) -> str:
        return f"PhraseStore(groups={self.group_count}, phrases={self.phrase_count})"
