"""
Application exceptions.

Each exception carries the HTTP status it maps to; main.py registers a
single handler that renders them as {"error": {"message", "status"}}.
"""


class JoblyError(Exception):
    """Base exception for all Jobly errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(JoblyError):
    """Raised when input is missing, malformed or conflicts with stored data."""

    status_code = 400


class UnauthorizedError(JoblyError):
    """Raised when credentials are missing, invalid or insufficient."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class NotFoundError(JoblyError):
    """Raised when a lookup or mutation matches no rows."""

    status_code = 404
