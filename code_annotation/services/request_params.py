"""Request Parameters: path ids and JSON bodies turned into typed values or BAD_REQUEST.

Invariants:
    - url_param_int accepts only an optional "-" followed by ASCII digits, within
      the signed 64-bit range; anything else (missing, "+5", "1_0", " 7") -> 400
    - read_json_body never returns a partially-populated model; read or parse fault -> 400
"""

import re
from typing import TypeVar

from pydantic import BaseModel, ValidationError
from starlette.requests import ClientDisconnect, Request

from code_annotation.core.errors import bad_request

ModelT = TypeVar("ModelT", bound=BaseModel)

_INT_PATTERN = re.compile(r"-?[0-9]+")
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


def url_param_int(request: Request, name: str) -> int:
    """Parse the named path segment as an integer."""
    raw = request.path_params.get(name)
    if raw is None:
        raise bad_request(f"missing URL parameter {name}")
    text = str(raw)
    if not _INT_PATTERN.fullmatch(text):
        raise bad_request(f"URL parameter {name} must be an integer, got {raw!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise bad_request(f"URL parameter {name} is out of range, got {raw!r}")
    return value


async def read_json_body(request: Request, model: type[ModelT]) -> ModelT:
    """Read the whole request body and parse it into model."""
    try:
        body = await request.body()
    except ClientDisconnect as e:
        raise bad_request(f"could not read request body: {e}")

    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        raise bad_request(_describe(e))


def _describe(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "invalid request body: " + "; ".join(parts)
