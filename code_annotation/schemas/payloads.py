"""Payload Schemas: the closed set of wire shapes an envelope can carry.

Invariants:
    - Field names on the wire are fixed (camelCase: userId, leftBlobId, avatarURL ...)
    - Only wire-contract fields exist here; internal columns are never projected
    - Assignment.answer is nullable: null means unanswered, never ""

Design Decisions:
    - serialization_alias instead of alias: handlers build payloads with
      Python field names, only the JSON output uses camelCase
"""

from pydantic import BaseModel, Field


class ExperimentData(BaseModel):
    id: int
    name: str
    description: str
    progress: float


class AssignmentData(BaseModel):
    id: int
    user_id: int = Field(serialization_alias="userId")
    pair_id: int = Field(serialization_alias="pairId")
    experiment_id: int = Field(serialization_alias="experimentId")
    answer: str | None
    duration: int


class ExpAnnotationsData(BaseModel):
    """Answer tally for one file pair."""
    yes: int = 0
    maybe: int = 0
    no: int = 0
    skip: int = 0
    unanswered: int = 0
    total: int = 0


class FilePairData(BaseModel):
    """File pair detail: identities, similarity score, diff and line counts."""
    id: int
    diff: str
    score: float
    left_blob_id: str = Field(serialization_alias="leftBlobId")
    right_blob_id: str = Field(serialization_alias="rightBlobId")
    left_loc: int = Field(serialization_alias="leftLoc")
    right_loc: int = Field(serialization_alias="rightLoc")


class FilePairListItemData(BaseModel):
    id: int
    left_path: str = Field(serialization_alias="leftPath")
    right_path: str = Field(serialization_alias="rightPath")


class UserData(BaseModel):
    id: int
    login: str
    username: str
    avatar_url: str = Field(serialization_alias="avatarURL")
    role: str


class FeatureData(BaseModel):
    name: str
    weight: float


class FeaturesData(BaseModel):
    """Features of both blobs plus the aggregate pair score."""
    features_a: list[FeatureData] = Field(serialization_alias="featuresA")
    features_b: list[FeatureData] = Field(serialization_alias="featuresB")
    score: FeatureData


class CountData(BaseModel):
    count: int


class VersionData(BaseModel):
    version: str


class FilePairsUploadData(BaseModel):
    success: int
    failures: int


class TokenData(BaseModel):
    token: str
