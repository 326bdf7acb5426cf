class DomainError(Exception):
    """Base exception for everything the portal surfaces to the user."""


class ValidationError(DomainError):
    """Raised when input is invalid, locally or as reported by the backend."""


class AuthenticationError(DomainError):
    """Raised when the backend rejects login credentials."""


class AuthorizationError(DomainError):
    """Raised when the current role lacks permission for an action."""


class SessionExpiredError(DomainError):
    """Raised when the backend rejects the stored bearer credential.

    Handled globally (credential cleared, redirect to login), never inline.
    """


class NotFoundError(DomainError):
    """Raised when the requested resource does not exist."""


class BackendUnavailableError(DomainError):
    """Raised on network/transport failure or a backend server error."""


# Failures a view reports inline next to the form that triggered them.
INLINE_ERRORS = (ValidationError, AuthorizationError, NotFoundError, BackendUnavailableError)
