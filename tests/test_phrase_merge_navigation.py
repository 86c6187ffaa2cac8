# -*- coding: utf-8 -*-
"""
Unit Tests for phrase merging and in-group navigation.
"""

from core.phrase_merge import merge_new_phrases
from core.phrase_navigation import find_phrase, next_untranslated
from models.phrase_store import PhraseStore


class TestMergeNewPhrases:
    """Tests for merge_new_phrases()."""

    def test_existing_pairs_not_overwritten(self, sample_store):
        """Test that merging keeps existing translations and appends new pairs."""
        source = PhraseStore({"Menu": {"File": "Fichier", "Save": "Enregistrer"}})

        changed = merge_new_phrases(sample_store, source)

        assert changed is True
        assert sample_store.get_alternative("Menu", "File") == "Dosya"
        assert sample_store.get_alternative("Menu", "Save") == "Save"
        assert list(sample_store.get_group("Menu")) == ["File", "Open", "Save"]

    def test_missing_group_appended(self, sample_store):
        """Test appending a group that only the source has."""
        source = PhraseStore({"Help": {"About": "Hakkında"}})

        assert merge_new_phrases(sample_store, source) is True
        assert sample_store.group_names == ["Menu", "Dialogs", "Help"]
        assert sample_store.get_group("Help") == {"About": "About"}

    def test_nothing_new(self, sample_store):
        """Test merging a source whose pairs all exist."""
        before = sample_store.copy()
        source = PhraseStore({"Menu": {"Open": "X"}, "Dialogs": {"Cancel": "Y"}})

        assert merge_new_phrases(sample_store, source) is False
        assert sample_store == before

    def test_empty_new_group_is_not_a_change(self):
        """Test that a group added without phrases is not reported as a change."""
        target = PhraseStore({"A": {"x": "y"}})

        assert merge_new_phrases(target, PhraseStore({"B": {}})) is False
        assert target.group_names == ["A", "B"]
        assert target.get_group("A") == {"x": "y"}


class TestNavigation:
    """Tests for find_phrase() and next_untranslated()."""

    PHRASES = {
        "Open file": "Dosya aç",
        "Save": "Save",
        "Close file": "",
        "Quit": "Çıkış",
    }

    def test_find_is_case_insensitive(self):
        """Test case-insensitive search."""
        assert find_phrase(self.PHRASES, "FILE") == 0

    def test_find_matches_alternative(self):
        """Test matching on the alternative text."""
        assert find_phrase(self.PHRASES, "çık") == 3

    def test_find_starts_after_current_row(self):
        """Test that search begins after the start row."""
        assert find_phrase(self.PHRASES, "file", start=0) == 2

    def test_find_wraps_around(self):
        """Test wrap-around to the first rows."""
        assert find_phrase(self.PHRASES, "file", start=2) == 0

    def test_find_current_row_found_last(self):
        """Test that the start row itself is checked last."""
        assert find_phrase(self.PHRASES, "quit", start=3) == 3

    def test_find_no_match(self):
        """Test no match and empty query."""
        assert find_phrase(self.PHRASES, "missing") is None
        assert find_phrase(self.PHRASES, "") is None

    def test_next_untranslated(self):
        """Test stepping through untranslated rows."""
        assert next_untranslated(self.PHRASES) == 1
        assert next_untranslated(self.PHRASES, start=1) == 2
        assert next_untranslated(self.PHRASES, start=2) == 1

    def test_next_untranslated_none_left(self):
        """Test fully translated and empty groups."""
        assert next_untranslated({"a": "b"}) is None
        assert next_untranslated({}) is None
