"""Error kinds raised by the crud layer.

Each error carries the HTTP status it maps to; ``main.py`` registers a single
handler for :class:`AppError` so routers never translate these by hand.
"""


class AppError(Exception):
    status_code = 500
    default_detail = "Internal server error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class Unauthenticated(AppError):
    status_code = 401
    default_detail = "Not authenticated"


class NotFound(AppError):
    status_code = 404
    default_detail = "Not found"


class Forbidden(AppError):
    status_code = 403
    default_detail = "Forbidden"


class ValidationError(AppError):
    status_code = 400
    default_detail = "Invalid request"
