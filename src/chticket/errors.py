"""Exception types shared across ch-ticket."""

from typing import Any, Optional


class ChticketError(Exception):
    """Base class for ch-ticket errors."""


class ValidationError(ChticketError):
    """An answer violates its prompt's rule. The message is shown on re-prompt."""


class NotConfiguredError(ChticketError):
    """No usable token or default project. Routes to the setup flow."""


class ClubhouseAPIError(ChticketError):
    """Clubhouse API call failed."""

    def __init__(self, message: str, status: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.status = status
        self.payload = payload


class SubmissionError(ClubhouseAPIError):
    """Story creation was rejected by the API."""
