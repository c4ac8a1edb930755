"""
Application Errors

Every error raised on purpose by the backend derives from JoblyError and
carries the HTTP status it should be reported with.
"""


class JoblyError(Exception):
    """Base error with a message and HTTP status code."""

    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
        self.message = message


class BadRequestError(JoblyError):
    """Invalid request input."""

    status_code = 400

    def __init__(self, message: str = "Bad Request"):
        super().__init__(message)


class NoDataProvided(BadRequestError):
    """A partial update was requested with no fields to change."""

    def __init__(self, message: str = "No data"):
        super().__init__(message)


class UnauthorizedError(JoblyError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class ForbiddenError(JoblyError):
    status_code = 403

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message)


class NotFoundError(JoblyError):
    status_code = 404

    def __init__(self, message: str = "Not Found"):
        super().__init__(message)
