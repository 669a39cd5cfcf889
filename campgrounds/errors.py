"""
Error kinds surfaced to the user as a rendered error page.

Every error carries a message and an HTTP status code. The
ErrorTranslatorMiddleware reads both; anything that is not an AppError
is rendered as a generic 500.
"""

DEFAULT_ERROR_MESSAGE = "Oh no, Something went Wrong"


class AppError(Exception):
    """Base error with a user-facing message and a status code."""

    status_code = 500
    default_message = DEFAULT_ERROR_MESSAGE

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(AppError):
    """
    A submitted payload failed its schema check.
    `field_errors` keeps the structured list; `message` is the comma-joined text.
    """

    status_code = 400
    default_message = "Invalid data"

    def __init__(self, message: str | None = None, field_errors=None):
        super().__init__(message)
        self.field_errors = list(field_errors or [])


class NotFoundError(AppError):
    status_code = 404
    default_message = "Page not Found"
