# -*- coding: utf-8 -*-
"""
Language Editor Codec Package

Reading and writing of XML language files.
"""

from codec.document_codec import (
    parse,
    serialize,
    serialize_english_only,
    to_bytes,
    read_document,
    write_document,
)

__all__ = [
    'parse',
    'serialize',
    'serialize_english_only',
    'to_bytes',
    'read_document',
    'write_document',
]
