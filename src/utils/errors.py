"""Error taxonomy and uniform error responses for the API."""

from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus
from typing import Any, Dict, List, Optional


class ErrorKind(str, Enum):
    """Closed set of error kinds surfaced by the API."""

    NOT_FOUND = "not_found"
    UNPROCESSABLE_ENTITY = "unprocessable_entity"
    MALFORMED_REQUEST = "malformed_request"
    VALIDATION_FAILED = "validation_failed"
    STORE_FAILURE = "store_failure"
    INTERNAL_FAILURE = "internal_failure"


# Every kind has exactly one status code.
STATUS_BY_KIND: Dict[ErrorKind, HTTPStatus] = {
    ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorKind.UNPROCESSABLE_ENTITY: HTTPStatus.UNPROCESSABLE_ENTITY,
    ErrorKind.MALFORMED_REQUEST: HTTPStatus.BAD_REQUEST,
    ErrorKind.VALIDATION_FAILED: HTTPStatus.BAD_REQUEST,
    ErrorKind.STORE_FAILURE: HTTPStatus.INTERNAL_SERVER_ERROR,
    ErrorKind.INTERNAL_FAILURE: HTTPStatus.INTERNAL_SERVER_ERROR,
}


@dataclass
class Violation:
    """A single rule violation on a record field."""

    field: str
    rule: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary."""
        return {
            "field": self.field,
            "rule": self.rule,
            "message": self.message,
        }


@dataclass
class ErrorResponse:
    """Status code and JSON body for an error."""

    message: str
    status_code: int
    kind: ErrorKind

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON body sent to clients."""
        return {"message": self.message}


class APIError(Exception):
    """Base exception for API errors."""

    kind: ErrorKind = ErrorKind.INTERNAL_FAILURE
    message: str = "Internal Server Error."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.__class__.message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return int(STATUS_BY_KIND[self.kind])

    def to_response(self) -> ErrorResponse:
        """Convert exception to structured error response."""
        return ErrorResponse(
            message=self.message,
            status_code=self.status_code,
            kind=self.kind,
        )


class NotFoundError(APIError):
    """Exception for a missing resource or unmatched route."""

    kind: ErrorKind = ErrorKind.NOT_FOUND
    message: str = "Not Found."


class UnprocessableEntityError(APIError):
    """Exception for integrity-guard rejections; the detail is sent verbatim."""

    kind: ErrorKind = ErrorKind.UNPROCESSABLE_ENTITY
    message: str = "Unprocessable Entity."

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class MalformedRequestError(APIError):
    """Exception for requests the HTTP layer could not parse."""

    kind: ErrorKind = ErrorKind.MALFORMED_REQUEST

    def __init__(self, cause: Any):
        self.cause = cause
        super().__init__(f"Bad Request. [{cause}]")


class ValidationFailedError(APIError):
    """Exception carrying every field rule violation of a record."""

    kind: ErrorKind = ErrorKind.VALIDATION_FAILED

    def __init__(self, violations: List[Violation]):
        self.violations = list(violations)
        summary = "; ".join(str(v) for v in self.violations)
        super().__init__(f"Bad Request. [{summary}]")


class StoreFailureError(APIError):
    """Exception for storage operation failures."""

    kind: ErrorKind = ErrorKind.STORE_FAILURE

    def __init__(self, cause: Any):
        self.cause = cause
        super().__init__(f"Internal Server Error. [{cause}]")


class InternalFailureError(APIError):
    """Catch-all exception for unexpected failures."""

    kind: ErrorKind = ErrorKind.INTERNAL_FAILURE

    def __init__(self, cause: Any):
        self.cause = cause
        super().__init__(f"Internal Server Error. [{cause}]")


def create_not_exists_error(field: str, value: Any) -> UnprocessableEntityError:
    """Create the rejection for a reference to a missing parent row."""
    return UnprocessableEntityError(f"{field} [{value}] is not exists.")


def create_cannot_delete_error(field: str, value: Any) -> UnprocessableEntityError:
    """Create the rejection for deleting a row that is still referenced."""
    return UnprocessableEntityError(f"{field} [{value}] can not delete.")
