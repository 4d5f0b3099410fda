"""Exception hierarchy for the camp dashboard."""


class CampError(Exception):
    """Base exception for all camp errors."""


class NotFoundError(CampError):
    """A referenced stand or hunter does not exist."""


class ConflictError(CampError):
    """The stand is already occupied."""


class ValidationError(CampError):
    """A required precondition does not hold (e.g. hunter not checked in)."""


class StorageError(CampError):
    """A persisted collection could not be read or written."""


class UpstreamError(CampError):
    """The weather service failed or returned something unusable."""
