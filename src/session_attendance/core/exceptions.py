class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 500


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""

    status_code = 400


class InvalidDateError(ValidationError):
    """Raised when a session date does not parse to a calendar date."""


class AuthenticationError(DomainError):
    """Raised when the caller cannot be identified (missing, bad or expired token)."""

    status_code = 401


class InvalidCredentialsError(AuthenticationError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    status_code = 403


class NotOwnerError(AuthorizationError):
    """Raised when a professor acts on a course they do not own."""


class NotEnrolledError(AuthorizationError):
    """Raised when a student checks in to a course they are not enrolled in."""


class NotFoundError(DomainError):
    status_code = 404


class CourseNotFoundError(NotFoundError):
    pass


class SessionNotFoundError(NotFoundError):
    pass


class ConflictError(DomainError):
    status_code = 409


class DuplicateKeyError(ConflictError):
    """Raised by repositories when an insert hits a uniqueness constraint."""
