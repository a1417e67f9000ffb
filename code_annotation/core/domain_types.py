"""Domain Types: identity wrappers, closed value sets and plain value objects.

Invariants:
    - ExperimentId, UserId, AssignmentId, FilePairId wrap int row ids
    - Role and Answer are closed sets; their .value is the canonical wire string
    - Feature is immutable (name, weight)

Design Decisions:
    - NewType over wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ExperimentId = NewType("ExperimentId", int)
UserId = NewType("UserId", int)
AssignmentId = NewType("AssignmentId", int)
FilePairId = NewType("FilePairId", int)


# ─── Value Types ─────────────────────────────────────────────────

Progress = NewType("Progress", float)   # 0.0–100.0


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """User role kinds."""
    REQUESTER = "requester"
    WORKER = "worker"

    def __str__(self) -> str:
        return self.value


class Answer(str, Enum):
    """Answers a worker can record for a file pair."""
    YES = "yes"
    MAYBE = "maybe"
    NO = "no"
    SKIP = "skip"


@dataclass(frozen=True)
class Feature:
    """A named numeric weight computed for a blob or a pair."""
    name: str
    weight: float
