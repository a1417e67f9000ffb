"""Serializers: project domain entities onto payload schemas and wrap them in envelopes.

Invariants:
    - Pure projections: only wire-contract fields are copied, nothing is looked up
    - Total: well-formed entities never make a serializer raise
    - Every constructor delegates to new_response (status 200 with data)
    - List order is preserved from the caller; nothing is re-sorted
"""

from typing import Sequence

from code_annotation.core.annotation_summary import AnnotationSummary
from code_annotation.core.domain_types import Feature, Role
from code_annotation.core.repository_protocols import (
    AssignmentLike, ExperimentLike, FilePairLike, UserLike,
)
from code_annotation.schemas.envelope import Response, new_response
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


def _experiment_data(e: ExperimentLike, progress: float) -> ExperimentData:
    return ExperimentData(
        id=e.id, name=e.name, description=e.description, progress=progress,
    )


def new_experiment_response(e: ExperimentLike, progress: float) -> Response:
    """Response for one experiment with the caller's progress."""
    return new_response(_experiment_data(e, progress))


def new_experiments_response(
    experiments: Sequence[ExperimentLike], progresses: Sequence[float],
) -> Response:
    """Response for a list of experiments; progresses[i] belongs to experiments[i]."""
    return new_response([
        _experiment_data(e, p)
        for e, p in zip(experiments, progresses, strict=True)
    ])


def new_assignments_response(assignments: Sequence[AssignmentLike]) -> Response:
    return new_response([
        AssignmentData(
            id=a.id,
            user_id=a.user_id,
            pair_id=a.pair_id,
            experiment_id=a.experiment_id,
            answer=a.answer,
            duration=a.duration,
        )
        for a in assignments
    ])


def new_exp_annotations_response(summary: AnnotationSummary) -> Response:
    """Response for the answer tally of a file pair."""
    return new_response(ExpAnnotationsData(
        yes=summary.yes,
        maybe=summary.maybe,
        no=summary.no,
        skip=summary.skip,
        unanswered=summary.unanswered,
        total=summary.total,
    ))


def new_file_pair_response(
    fp: FilePairLike, diff: str, left_loc: int, right_loc: int,
) -> Response:
    return new_response(FilePairData(
        id=fp.id,
        diff=diff,
        score=fp.score,
        left_blob_id=fp.left_blob_id,
        right_blob_id=fp.right_blob_id,
        left_loc=left_loc,
        right_loc=right_loc,
    ))


def new_list_file_pairs_response(file_pairs: Sequence[FilePairLike]) -> Response:
    return new_response([
        FilePairListItemData(
            id=fp.id, left_path=fp.left_path, right_path=fp.right_path,
        )
        for fp in file_pairs
    ])


def new_user_response(u: UserLike) -> Response:
    return new_response(UserData(
        id=u.id,
        login=u.login,
        username=u.username,
        avatar_url=u.avatar_url,
        role=Role(u.role).value,
    ))


def _feature_data(f: Feature) -> FeatureData:
    return FeatureData(name=f.name, weight=f.weight)


def new_features_response(
    features_a: Sequence[Feature], features_b: Sequence[Feature], score: Feature,
) -> Response:
    """Response for the features of both blobs of a pair and the pair score."""
    return new_response(FeaturesData(
        features_a=[_feature_data(f) for f in features_a],
        features_b=[_feature_data(f) for f in features_b],
        score=_feature_data(score),
    ))


def new_count_response(count: int) -> Response:
    return new_response(CountData(count=count))


def new_version_response(version: str) -> Response:
    """Response with the running server version."""
    return new_response(VersionData(version=version))


def new_file_pairs_upload_response(success: int, failures: int) -> Response:
    return new_response(FilePairsUploadData(success=success, failures=failures))


def new_token_response(token: str) -> Response:
    return new_response(TokenData(token=token))
