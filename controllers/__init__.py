# -*- coding: utf-8 -*-
"""
Language Editor Controllers Package

Controllers hold the application logic the editor surface calls into.
"""

from controllers.translation_manager import TranslationManager

__all__ = [
    'TranslationManager',
]
