"""Error taxonomy shared by services and the HTTP layer."""


class TrackerError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TrackerError):
    """A required field is missing or a value is out of range."""

    status_code = 400


class NotFoundError(TrackerError):
    """An id or a referenced record does not exist."""

    status_code = 404


class ConflictError(TrackerError):
    """A write would violate a uniqueness rule."""

    status_code = 409


class UpstreamError(TrackerError):
    """An external provider call failed or returned unusable data."""

    status_code = 502


class UpstreamUnavailable(TrackerError):
    """An optional external provider is not configured."""

    status_code = 503


class StorageError(TrackerError):
    """Reading or writing a ledger document failed."""

    status_code = 500
