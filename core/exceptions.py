"""Typed exceptions for diary operations."""


class DiaryError(Exception):
    """Base class for diary errors. The message is safe to show to users."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DiaryError):
    """
    Input failed validation (missing title, missing content and mood, ...).

    Client-correctable. Raised before anything is persisted.
    """


class NotFoundError(DiaryError):
    """Target note does not exist. Non-fatal."""


class StoreError(DiaryError):
    """
    Storage fault (driver error, I/O failure, corrupted data).

    The message is generic; driver details are logged, never attached.
    Not retried.
    """
