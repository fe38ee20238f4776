# exceptions.py


class IssueTrackerError(Exception):
    """Base class for errors raised by the service layer."""

    def __init__(self, message):
        self.message = message
        super().__init__(self.message)


class InvalidReferenceError(IssueTrackerError):
    """Raised when a write references a user or label that does not exist."""


class DuplicateError(IssueTrackerError):
    """Raised when a unique field (email, label name) is already taken."""


class AuthenticationError(IssueTrackerError):
    """Raised for bad credentials or an unusable token."""


class InvalidQueryError(IssueTrackerError):
    """Raised for listing parameters outside their allowed range."""
