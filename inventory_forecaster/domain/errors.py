"""
Domain exceptions for inventory-forecaster.

Every error is recoverable: it is raised to the caller, never aborts the
process, and leaves registry and history untouched.
"""


class ForecasterError(Exception):
    """Base exception for forecaster operations"""
    pass


class NotFoundError(ForecasterError, KeyError):
    """Raised when a product name (or entity index) is unknown"""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return Exception.__str__(self)


class AlreadyExistsError(ForecasterError):
    """Raised when a product is registered twice (names are case-insensitive)"""
    pass


class InvalidQuantityError(ForecasterError, ValueError):
    """Raised when a sale quantity is not strictly positive"""
    pass


class NegativeHorizonError(ForecasterError, ValueError):
    """Raised when a forecast horizon (days_ahead) is negative"""
    pass


class ValidationError(ForecasterError, ValueError):
    """Raised when product attributes or store settings are malformed"""
    pass


class HistoryOutOfSyncError(ForecasterError):
    """Raised when the history store no longer has one row per registered product"""
    pass
