# -*- coding: utf-8 -*-
"""
Language Editor Models Package

Data models used by the controllers: the phrase store and operation results.
"""

from models.phrase_store import PhraseStore, is_untranslated
from models.operation_result import OperationResult

__all__ = ['PhraseStore', 'is_untranslated', 'OperationResult']
