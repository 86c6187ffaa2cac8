# -*- coding: utf-8 -*-
"""
Outcome of a TranslationManager operation.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class OperationResult:
    """
    Success flag plus either the operation's value or the error message
    that was also emitted on the manager's execution_error signal.
    """
    success: bool
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, value: Any = None) -> 'OperationResult':
        return cls(True, value)

    @classmethod
    def failed(cls, error: str, value: Any = None) -> 'OperationResult':
        return cls(False, value, error)

    def __bool__(self) -> bool:
        return self.success
