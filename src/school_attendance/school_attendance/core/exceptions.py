from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class RetrievalError(DomainError):
    """Raised when reading students, sections or subjects from the store fails."""

    def __init__(self, message: str, *, resource: str, key: Optional[str] = None):
        super().__init__(message)
        self.resource = resource
        self.key = key
