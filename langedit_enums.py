"""
Language Editor enum definitions.
"""

from enum import Enum


class PhraseColumn(str, Enum):
    """Which side of a phrase pair a text export writes."""
    ENGLISH = 'eng'
    ALTERNATIVE = 'alt'
