class NotifierError(Exception):
    """Base exception for notification backends."""


class NotifierDependencyError(NotifierError):
    """Raised when an optional dependency for a notification backend is missing."""
