"""
Domain errors raised by repositories and services

The API layer maps each subclass to an HTTP status in src.api.main.
"""


class AppError(Exception):
    """Base class for errors that carry a user-visible message"""

    error_type = "error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    """A referenced entity does not exist"""

    error_type = "not_found"
    status_code = 404


class InvalidRoleError(AppError):
    """A referenced user lacks the role the operation requires"""

    error_type = "invalid_role"
    status_code = 400


class ConflictError(AppError):
    """A uniqueness constraint would be violated"""

    error_type = "conflict"
    status_code = 409
