from typing import Any, Mapping, Optional


class MealStreakError(Exception):
    """Base for errors that handlers render as the JSON error envelope.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context
        code: machine-readable error code (defaults to ``default_code``)
        http_status: HTTP status code the handler responds with
    """

    http_status = 500
    default_code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str = "Unexpected error", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class NotFoundError(MealStreakError):
    """Raised when no meal exists for a given identifier.

    The request was well-formed, the record just isn't there. http_status is 404.
    """

    http_status = 404
    default_code = "NOT_FOUND"

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class UnauthorizedError(MealStreakError):
    """Raised when the caller's identity could not be resolved. http_status is 401."""

    http_status = 401
    default_code = "UNAUTHORIZED"

    def __init__(self, message: str = "Unauthorized", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)
