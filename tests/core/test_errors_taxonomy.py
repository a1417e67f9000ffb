"""Error Taxonomy: status-bearing errors and the message fallback chain.

Tests:
    - new_http_error joins message parts with single spaces
    - str() falls back: title -> status phrase -> 500 phrase
    - ErrorKind maps to the four status codes of the taxonomy
    - to_wire omits details when absent
"""

import pytest

from code_annotation.core.errors import (
    ErrorKind,
    HTTPError,
    HTTPErrorLike,
    bad_request,
    internal,
    new_http_error,
    not_found,
    status_text,
    unauthenticated,
)


def test_new_http_error_joins_parts_with_spaces():
    err = new_http_error(400, "invalid", "experiment", "id")
    assert err.title == "invalid experiment id"
    assert err.status_code() == 400


def test_new_http_error_without_parts_has_empty_title():
    err = new_http_error(404)
    assert err.title == ""


def test_http_error_is_an_exception_with_status():
    err = new_http_error(404, "no experiment found")
    assert isinstance(err, Exception)
    assert isinstance(err, HTTPErrorLike)
    with pytest.raises(HTTPError) as exc_info:
        raise err
    assert exc_info.value.status_code() == 404


def test_message_is_title_when_present():
    assert str(new_http_error(404, "no experiment found")) == "no experiment found"


def test_empty_title_falls_back_to_status_phrase():
    assert str(new_http_error(404)) == "Not Found"
    assert str(new_http_error(401)) == "Unauthorized"


def test_empty_title_and_unknown_status_fall_back_to_500_phrase():
    assert str(new_http_error(0)) == "Internal Server Error"
    assert str(new_http_error(999)) == "Internal Server Error"


def test_status_text_unknown_code_is_empty():
    assert status_text(799) == ""
    assert status_text(500) == "Internal Server Error"


@pytest.mark.parametrize("kind, status", [
    (ErrorKind.UNAUTHENTICATED, 401),
    (ErrorKind.BAD_REQUEST, 400),
    (ErrorKind.NOT_FOUND, 404),
    (ErrorKind.INTERNAL, 500),
])
def test_kind_status(kind, status):
    assert kind.status == status
    assert ErrorKind.from_status(status) is kind


def test_unknown_status_maps_to_internal_kind():
    assert ErrorKind.from_status(418) is ErrorKind.INTERNAL
    assert new_http_error(418, "teapot").kind is ErrorKind.INTERNAL


def test_kind_shortcuts():
    assert unauthenticated("x").status_code() == 401
    assert bad_request("x").status_code() == 400
    assert not_found("x").status_code() == 404
    assert internal("x").status_code() == 500


def test_to_wire_omits_missing_details():
    assert not_found("no experiment found").to_wire() == {
        "status": 404, "title": "no experiment found",
    }


def test_to_wire_includes_details_and_fallback_title():
    err = HTTPError(400, details="name: expected string")
    assert err.to_wire() == {
        "status": 400, "title": "Bad Request", "details": "name: expected string",
    }
