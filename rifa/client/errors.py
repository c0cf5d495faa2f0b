"""Error taxonomy for the board client."""

from __future__ import annotations


class RifaError(Exception):
    """Base class for every client-side failure."""


class NetworkError(RifaError):
    """The server could not be reached or answered with an unreadable payload."""


class ValidationError(RifaError):
    """Input was rejected locally before any request was sent."""


class RejectionError(RifaError):
    """The server refused a request and explained why."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ConfirmationAborted(RifaError):
    """The user declined or mistyped the reset confirmation."""


class BusyError(RifaError):
    """Another submit or reset is still waiting for the server."""


class SnapshotError(RifaError):
    """The board image could not be written."""
