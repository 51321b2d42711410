"""
Error taxonomy for the dashboard API.

Route handlers raise these; the application renders them as
``{"error": message}`` with the matching status code.
"""


class DashboardError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DashboardError):
    """Malformed, missing or invalid request input."""

    status_code = 400


class NotFoundError(DashboardError):
    """A referenced entity does not exist."""

    status_code = 404


class UnexpectedError(DashboardError):
    """An exception caught while processing a request."""

    status_code = 500
