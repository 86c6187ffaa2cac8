# -*- coding: utf-8 -*-
"""
Language Editor Exceptions Module
Custom exception classes for structured error handling across the application.
"""


class LangEditError(Exception):
    """
    Base exception class for all Language Editor errors.

    Attributes:
        message: Human-readable error message
        details: Optional additional details (dict, string, etc.)
    """

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Document Exceptions
# =============================================================================

class DocumentError(LangEditError):
    """Base exception for language file (XML) errors."""
    pass


class DocumentParseError(DocumentError):
    """
    Raised when a language document does not have the expected structure.

    The phrases read before the failure are kept in ``partial_store``.
    """

    def __init__(self, message: str, partial_store=None, group: str = None):
        super().__init__(message, details={'group': group} if group else None)
        self.partial_store = partial_store
        self.group = group


# =============================================================================
# File / Import Exceptions
# =============================================================================

class FileOperationError(LangEditError):
    """Raised when a file operation (read/write) fails."""

    def __init__(self, message: str, file_path: str = None, operation: str = None):
        super().__init__(message, details={'file_path': file_path, 'operation': operation})
        self.file_path = file_path
        self.operation = operation


class PositionalImportError(LangEditError):
    """Raised when a text file has fewer lines than the store has phrases."""

    def __init__(self, message: str, line_count: int = None, phrase_count: int = None):
        super().__init__(message, details={'lines': line_count, 'phrases': phrase_count})
        self.line_count = line_count
        self.phrase_count = phrase_count


class PhraseLookupError(LangEditError):
    """Raised when a group or English phrase is not in the store."""

    def __init__(self, message: str, group: str = None, phrase: str = None):
        super().__init__(message)
        self.group = group
        self.phrase = phrase

