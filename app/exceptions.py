from typing import Any, Mapping, Optional


class ServiceError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Service error"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = dict(self.details)
        return payload


class ServiceValidationError(ServiceError):
    """Raised when input data is invalid or a precondition for a service call is not met.

    http_status is 400.
    """

    http_status = 400
    default_message = "Invalid input"


class NotFoundError(ServiceError):
    """Raised when a requested resource was not found. http_status is 404."""

    http_status = 404
    default_message = "Not found"


class ConflictError(ServiceError):
    """Raised when a resource conflict occurs (e.g., duplicate entry). http_status is 409."""

    http_status = 409
    default_message = "Conflict"


class DataIntegrityError(ServiceError):
    """Raised when a stored value cannot be decoded (e.g., malformed JSON column).

    http_status is 500.
    """

    http_status = 500
    default_message = "Stored data is corrupt"
