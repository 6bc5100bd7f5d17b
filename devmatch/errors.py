"""Error taxonomy shared by the DevMatch pipeline."""

from __future__ import annotations


class DevMatchError(Exception):
    """Base exception for DevMatch failures."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


class NotFoundError(DevMatchError):
    """The requested profile or posting does not exist."""


class UpstreamUnavailableError(DevMatchError):
    """An external source returned a non-success response or could not be reached."""

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message, original_error)
        self.status_code = status_code


class ParseFailureError(DevMatchError):
    """An external source returned a body that could not be interpreted."""


class MisconfiguredError(DevMatchError):
    """A required credential or setting is missing."""
