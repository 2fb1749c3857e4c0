"""Application errors mapped to ``{"error": message}`` responses in app.main."""


class ReportAPIError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ReportAPIError):
    """A point lookup found nothing."""

    status_code = 404


class ConflictError(ReportAPIError):
    """A precondition such as natural-key uniqueness does not hold."""

    status_code = 400


class UnauthorizedError(ReportAPIError):
    status_code = 401
