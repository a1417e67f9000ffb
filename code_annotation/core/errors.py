"""Error Taxonomy: one HTTP-status-bearing error type for every failure mode.

Invariants:
    - Every raised failure is an HTTPError: it is an Exception AND exposes status_code()
    - str(error) never returns an empty string: title -> status phrase -> 500 phrase
    - to_wire() produces the {status, title, details?} item of the error envelope
    - Failure kinds are an Enum (ErrorKind), not a subclass hierarchy

Design Decisions:
    - HTTPErrorLike Protocol: the dispatcher only needs status_code() and str(),
      any object offering both can be rendered
    - http.HTTPStatus for standard reason phrases (no hand-maintained table)
"""

from enum import Enum
from http import HTTPStatus
from typing import Protocol, runtime_checkable


class ErrorKind(str, Enum):
    """Failure kinds a request handler can end in."""
    UNAUTHENTICATED = "unauthenticated"
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"

    @property
    def status(self) -> int:
        return _KIND_STATUS[self]

    @classmethod
    def from_status(cls, status: int) -> "ErrorKind":
        """Closest kind for an arbitrary status code (unknown -> INTERNAL)."""
        for kind, code in _KIND_STATUS.items():
            if code == status:
                return kind
        return cls.INTERNAL


_KIND_STATUS: dict[ErrorKind, int] = {
    ErrorKind.UNAUTHENTICATED: int(HTTPStatus.UNAUTHORIZED),
    ErrorKind.BAD_REQUEST: int(HTTPStatus.BAD_REQUEST),
    ErrorKind.NOT_FOUND: int(HTTPStatus.NOT_FOUND),
    ErrorKind.INTERNAL: int(HTTPStatus.INTERNAL_SERVER_ERROR),
}


@runtime_checkable
class HTTPErrorLike(Protocol):
    """Anything the dispatcher can render as an error envelope item."""
    def status_code(self) -> int: ...
    def __str__(self) -> str: ...


def status_text(status: int) -> str:
    """Standard reason phrase for a status code, "" when the code is unknown."""
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return ""


class HTTPError(Exception):
    """A failure carrying its HTTP status, a title and optional details."""

    def __init__(self, status: int, title: str = "", details: str | None = None):
        self.status = status
        self.title = title
        self.details = details
        super().__init__(self.message)

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.from_status(self.status)

    @property
    def message(self) -> str:
        if self.title:
            return self.title
        if text := status_text(self.status):
            return text
        return status_text(HTTPStatus.INTERNAL_SERVER_ERROR)

    def status_code(self) -> int:
        return self.status

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"HTTPError(status={self.status}, title={self.title!r})"

    def to_wire(self) -> dict:
        """Error envelope item. details is omitted when absent."""
        item: dict = {"status": self.status, "title": self.message}
        if self.details:
            item["details"] = self.details
        return item


def new_http_error(status_code: int, *msg: str) -> HTTPError:
    """Build an HTTPError whose title is the message parts joined by spaces."""
    return HTTPError(status_code, " ".join(msg))


# ─── Kind shortcuts ─────────────────────────────────────────────

def unauthenticated(*msg: str) -> HTTPError:
    return new_http_error(ErrorKind.UNAUTHENTICATED.status, *msg)


def bad_request(*msg: str) -> HTTPError:
    return new_http_error(ErrorKind.BAD_REQUEST.status, *msg)


def not_found(*msg: str) -> HTTPError:
    return new_http_error(ErrorKind.NOT_FOUND.status, *msg)


def internal(*msg: str) -> HTTPError:
    return new_http_error(ErrorKind.INTERNAL.status, *msg)


class RepositoryError(Exception):
    """A persistence fault, raised by repository implementations.

    Handlers never let it escape: they wrap it with context as INTERNAL.
    """

    def __init__(self, operation: str, cause: Exception):
        super().__init__(f"{operation} failed: {cause}")
        self.operation = operation
        self.cause = cause
