# app/utils/errors.py


class AppError(Exception):
    """Base error converted to the {success: false, error} envelope."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    status_code = 400


class InvalidDateError(ValidationError):
    pass


class InvalidRangeError(ValidationError):
    pass


class AuthError(AppError):
    status_code = 401


class ForbiddenError(AppError):
    status_code = 403


class NotFoundError(AppError):
    status_code = 404


class InternalError(AppError):
    status_code = 500
