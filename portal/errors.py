"""
Portal Errors

Services raise these; route handlers map them to an HTTP status.
"""


class PortalError(Exception):
    """Base class for every failure a request handler knows how to report."""
    status_code = 500

    def __init__(self, message='Internal Server Error'):
        super().__init__(message)
        self.message = message


class ValidationError(PortalError):
    """A required field is missing or blank."""
    status_code = 400

    def __init__(self, message='Missing required fields.', missing=None):
        super().__init__(message)
        self.missing = list(missing or [])


class DuplicateIdentityError(ValidationError):
    """Username already registered for this role."""

    def __init__(self, username, role):
        super().__init__(f'{role.label} "{username}" already exists.', missing=[])
        self.username = username
        self.role = role


class NotFoundError(PortalError):
    status_code = 404


class AuthenticationError(PortalError):
    status_code = 401


class UnknownIdentityError(AuthenticationError):
    """No identity with that username in the requested role."""


class InvalidCredentialsError(AuthenticationError):
    """Password did not match the stored hash."""

    def __init__(self, message='Invalid credentials'):
        super().__init__(message)
