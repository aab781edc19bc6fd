"""Custom exception hierarchy for recstore."""

from __future__ import annotations


class RecstoreError(Exception):
    """Base exception for all recstore errors."""


class RecstoreConfigError(RecstoreError):
    """Invalid or missing configuration."""


class RecordIdError(RecstoreError):
    """A record does not expose a usable string id."""

    def __init__(self, message: str, *, record_type: str = "") -> None:
        self.record_type = record_type
        super().__init__(message)
