"""Rendering: write envelopes as HTTP responses.

Invariants:
    - An envelope with a status is written with that HTTP status and its JSON body
    - The empty envelope and 204 envelopes are written without a body
      (HTTP forbids a body on 204 No Content)
"""

from fastapi import status
from fastapi.responses import JSONResponse, Response as HTTPResponse

from code_annotation.core.errors import HTTPErrorLike
from code_annotation.schemas.envelope import Response, new_error_response


def render(response: Response) -> HTTPResponse:
    if response.is_empty or response.status in (None, status.HTTP_204_NO_CONTENT):
        return HTTPResponse(status_code=status.HTTP_204_NO_CONTENT)
    return JSONResponse(status_code=response.status, content=response.to_wire())


def render_errors(*errors: HTTPErrorLike) -> JSONResponse:
    envelope = new_error_response(*errors)
    return JSONResponse(status_code=envelope.status, content=envelope.to_wire())
