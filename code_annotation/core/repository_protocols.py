"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Implementations raise RepositoryError (core/errors.py) on any persistence fault
    - Lookups of a missing row return None, they do not raise

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions that USE their results are never async themselves
"""

from typing import Mapping, Protocol, Sequence

from code_annotation.core.domain_types import (
    AssignmentId, ExperimentId, FilePairId, Role, UserId,
)


# ─── Entity shapes ───────────────────────────────────────────────

class ExperimentLike(Protocol):
    """Structural contract for Experiment rows passed to handlers."""
    id: int
    name: str
    description: str


class AssignmentLike(Protocol):
    id: int
    user_id: int
    pair_id: int
    experiment_id: int
    answer: str | None
    duration: int


class FilePairLike(Protocol):
    id: int
    experiment_id: int
    score: float
    left_blob_id: str
    left_path: str
    right_blob_id: str
    right_path: str


class UserLike(Protocol):
    id: int
    login: str
    username: str
    avatar_url: str
    role: Role


# ─── Repositories ────────────────────────────────────────────────

class ExperimentRepository(Protocol):
    """Contract for experiment persistence, implemented by shell."""
    async def get_by_id(self, experiment_id: ExperimentId) -> ExperimentLike | None: ...
    async def get_all(self) -> Sequence[ExperimentLike]: ...
    async def create(self, experiment: ExperimentLike) -> None: ...
    async def update(self, experiment: ExperimentLike) -> None: ...


class AssignmentRepository(Protocol):
    """Contract for assignment persistence, implemented by shell."""
    async def count_user_assignment(
        self, experiment_id: ExperimentId, user_id: UserId,
    ) -> int: ...
    async def count_complete_user_assignment(
        self, experiment_id: ExperimentId, user_id: UserId,
    ) -> int: ...
    async def get_for_user_experiment(
        self, experiment_id: ExperimentId, user_id: UserId,
    ) -> Sequence[AssignmentLike]: ...
    async def get_by_id(
        self, assignment_id: AssignmentId,
    ) -> AssignmentLike | None: ...
    async def update(self, assignment: AssignmentLike) -> None: ...
    async def get_answers_for_pair(
        self, experiment_id: ExperimentId, pair_id: FilePairId,
    ) -> list[str | None]: ...


class FilePairRepository(Protocol):
    """Contract for file pair reads, implemented by shell."""
    async def get_all_by_experiment(
        self, experiment_id: ExperimentId,
    ) -> Sequence[FilePairLike]: ...
    async def count_by_experiment(self, experiment_id: ExperimentId) -> int: ...


class UserRepository(Protocol):
    """Contract for user reads, implemented by shell."""
    async def get_by_id(self, user_id: UserId) -> UserLike | None: ...


# ─── Request collaborators ───────────────────────────────────────

class RequestLike(Protocol):
    """The part of an incoming request identity resolution reads."""
    @property
    def headers(self) -> Mapping[str, str]: ...


class IdentityResolver(Protocol):
    """Resolves the authenticated caller of a request.

    Raises an UNAUTHENTICATED HTTPError when no identity is attached.
    """
    def get_user_id(self, request: RequestLike) -> UserId: ...
