class JoblyError(Exception):
    """Base error for domain failures; carries the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str = "Internal server error", status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(JoblyError):
    """Malformed or empty input, or invalid filter bounds."""

    status_code = 400


class ConflictError(JoblyError):
    """Duplicate key on create."""

    status_code = 400


class NotFoundError(JoblyError):
    """Lookup key absent."""

    status_code = 404


class UnauthorizedError(JoblyError):
    status_code = 401


class ForbiddenError(JoblyError):
    status_code = 403
