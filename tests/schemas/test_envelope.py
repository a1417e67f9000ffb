"""Response Envelope: status invariants, the empty sentinel and error envelopes.

Invariants:
    - new_response never raises, for every payload shape and its zero value
    - None payload -> 204 without data; present payload -> 200 with data
    - Empty envelope serializes to {}
"""

import pytest

from code_annotation.core.errors import HTTPError, new_http_error, not_found
from code_annotation.schemas.envelope import (
    Response,
    new_empty_response,
    new_error_response,
    new_response,
)
from code_annotation.schemas.payloads import (
    AssignmentData,
    CountData,
    ExpAnnotationsData,
    ExperimentData,
    FeatureData,
    FeaturesData,
    FilePairData,
    FilePairListItemData,
    FilePairsUploadData,
    TokenData,
    UserData,
    VersionData,
)

ZERO_PAYLOADS = [
    ExperimentData(id=0, name="", description="", progress=0.0),
    ExpAnnotationsData(),
    FilePairData(
        id=0, diff="", score=0.0, left_blob_id="", right_blob_id="",
        left_loc=0, right_loc=0,
    ),
    UserData(id=0, login="", username="", avatar_url="", role=""),
    FeaturesData(
        features_a=[], features_b=[], score=FeatureData(name="", weight=0.0),
    ),
    CountData(count=0),
    VersionData(version=""),
    FilePairsUploadData(success=0, failures=0),
    TokenData(token=""),
    [],
    [ExperimentData(id=0, name="", description="", progress=0.0)],
    [AssignmentData(
        id=0, user_id=0, pair_id=0, experiment_id=0, answer=None, duration=0,
    )],
    [FilePairListItemData(id=0, left_path="", right_path="")],
]


@pytest.mark.parametrize("payload", ZERO_PAYLOADS)
def test_present_payload_is_200_with_data(payload):
    response = new_response(payload)
    assert response.status == 200
    assert response.data == payload
    assert response.errors is None


def test_none_payload_is_204_without_data():
    response = new_response(None)
    assert response.status == 204
    assert response.data is None
    assert response.to_wire() == {"status": 204}


def test_empty_response_carries_nothing():
    response = new_empty_response()
    assert response.status is None
    assert response.data is None
    assert response.is_empty
    assert response.to_wire() == {}


def test_responses_with_status_are_not_empty():
    assert not new_response(None).is_empty
    assert not new_response(CountData(count=0)).is_empty


def test_to_wire_keeps_list_payloads_and_aliases():
    response = new_response([AssignmentData(
        id=1, user_id=2, pair_id=3, experiment_id=4, answer=None, duration=10,
    )])
    assert response.to_wire() == {
        "status": 200,
        "data": [{
            "id": 1, "userId": 2, "pairId": 3, "experimentId": 4,
            "answer": None, "duration": 10,
        }],
    }


def test_empty_list_payload_is_200_with_empty_data():
    assert new_response([]).to_wire() == {"status": 200, "data": []}


def test_error_response_shape():
    response = new_error_response(not_found("no experiment found"))
    assert response.to_wire() == {
        "status": 404,
        "errors": [{"status": 404, "title": "no experiment found"}],
    }


def test_error_response_status_is_first_error_and_order_kept():
    response = new_error_response(
        new_http_error(400, "bad name"),
        HTTPError(500, details="boom"),
    )
    wire = response.to_wire()
    assert wire["status"] == 400
    assert wire["errors"] == [
        {"status": 400, "title": "bad name"},
        {"status": 500, "title": "Internal Server Error", "details": "boom"},
    ]
    assert "data" not in wire


def test_error_response_renders_fallback_titles():
    wire = new_error_response(new_http_error(401)).to_wire()
    assert wire["errors"][0]["title"] == "Unauthorized"


def test_envelope_model_defaults():
    assert Response().to_wire() == {}
