"""Response Envelope: the single {status, data?, errors?} shape of every response body.

Invariants:
    - new_response(None) -> status 204, no data
    - new_response(payload) -> status 200, data = payload (never raises)
    - new_empty_response() -> no status, no data, no errors ("nothing to send")
    - new_error_response(*errors) -> status of the first error, errors in order
    - to_wire() omits data when absent and errors when empty

Design Decisions:
    - data is a closed Union of payload schemas (ResponseData), not Any
    - Pydantic model for the envelope: same serialization path as every
      other schema in the API
"""

from http import HTTPStatus
from typing import Union

from pydantic import BaseModel

from code_annotation.core.errors import HTTPErrorLike
from code_annotation.schemas.payloads import (
    AssignmentData,
    CountData,
    ExpAnnotationsData,
    ExperimentData,
    FeaturesData,
    FilePairData,
    FilePairListItemData,
    FilePairsUploadData,
    TokenData,
    UserData,
    VersionData,
)

ResponseData = Union[
    ExperimentData,
    ExpAnnotationsData,
    FilePairData,
    UserData,
    FeaturesData,
    CountData,
    VersionData,
    FilePairsUploadData,
    TokenData,
    list[ExperimentData],
    list[AssignmentData],
    list[FilePairListItemData],
]


class ErrorItem(BaseModel):
    """One typed error as written in the envelope."""
    status: int
    title: str
    details: str | None = None


class Response(BaseModel):
    """Envelope of an HTTP response body."""
    status: int | None = None
    data: ResponseData | None = None
    errors: list[ErrorItem] | None = None

    @property
    def is_empty(self) -> bool:
        return self.status is None and self.data is None and not self.errors

    def to_wire(self) -> dict:
        """JSON-ready body with optional members omitted."""
        body: dict = {}
        if self.status is not None:
            body["status"] = self.status
        if self.data is not None:
            body["data"] = _dump_data(self.data)
        if self.errors:
            body["errors"] = [
                e.model_dump(mode="json", exclude_none=True) for e in self.errors
            ]
        return body


def _dump_data(data: ResponseData) -> dict | list:
    if isinstance(data, list):
        return [item.model_dump(mode="json", by_alias=True) for item in data]
    return data.model_dump(mode="json", by_alias=True)


def new_response(data: ResponseData | None) -> Response:
    """Wrap a payload: 204 without data, 200 with it."""
    if data is None:
        return Response(status=int(HTTPStatus.NO_CONTENT))
    return Response(status=int(HTTPStatus.OK), data=data)


def new_empty_response() -> Response:
    """Sentinel envelope for handlers with nothing further to send."""
    return Response()


def new_error_response(*errors: HTTPErrorLike) -> Response:
    """Failure envelope. The envelope status is the first error's status."""
    items = [_error_item(e) for e in errors]
    status = items[0].status if items else int(HTTPStatus.INTERNAL_SERVER_ERROR)
    return Response(status=status, errors=items)


def _error_item(error: HTTPErrorLike) -> ErrorItem:
    return ErrorItem(
        status=error.status_code(),
        title=str(error),
        details=getattr(error, "details", None) or None,
    )
