"""Exception hierarchy for the UniqueID SDK."""


class UniqueIdError(Exception):
    """SDK base exception."""


class InvalidLengthError(UniqueIdError, ValueError):
    """Length or count is not usable (non-integer, or truncates a number to nothing)."""


class EntropySourceUnavailableError(UniqueIdError):
    """Platform secure random source failed."""
