"""Dependencies: FastAPI providers that assemble handlers from request-scoped collaborators.

Invariants:
    - Repositories share the request's AsyncSession (one session per request)
    - Handlers are built per request; nothing is cached across requests
    - Tests swap any provider through app.dependency_overrides
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from code_annotation.config import get_settings
from code_annotation.core.repository_protocols import (
    AssignmentRepository,
    ExperimentRepository,
    FilePairRepository,
    IdentityResolver,
    UserRepository,
)
from code_annotation.infrastructure.database import get_db
from code_annotation.infrastructure.identity import HeaderIdentity
from code_annotation.infrastructure.repositories import (
    SqlAssignmentRepository,
    SqlExperimentRepository,
    SqlFilePairRepository,
    SqlUserRepository,
)
from code_annotation.services.assignments import AssignmentHandlers
from code_annotation.services.experiments import ExperimentHandlers
from code_annotation.services.file_pairs import FilePairHandlers
from code_annotation.services.users import UserHandlers


# ─── Collaborators ──────────────────────────────────────────────

def get_identity() -> IdentityResolver:
    return HeaderIdentity(get_settings().identity_header)


def get_experiment_repository(
    db: AsyncSession = Depends(get_db),
) -> ExperimentRepository:
    return SqlExperimentRepository(db)


def get_assignment_repository(
    db: AsyncSession = Depends(get_db),
) -> AssignmentRepository:
    return SqlAssignmentRepository(db)


def get_file_pair_repository(
    db: AsyncSession = Depends(get_db),
) -> FilePairRepository:
    return SqlFilePairRepository(db)


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return SqlUserRepository(db)


# ─── Handlers ───────────────────────────────────────────────────

def get_experiment_handlers(
    experiments: ExperimentRepository = Depends(get_experiment_repository),
    assignments: AssignmentRepository = Depends(get_assignment_repository),
    identity: IdentityResolver = Depends(get_identity),
) -> ExperimentHandlers:
    return ExperimentHandlers(experiments, assignments, identity)


def get_assignment_handlers(
    experiments: ExperimentRepository = Depends(get_experiment_repository),
    assignments: AssignmentRepository = Depends(get_assignment_repository),
    identity: IdentityResolver = Depends(get_identity),
) -> AssignmentHandlers:
    return AssignmentHandlers(experiments, assignments, identity)


def get_file_pair_handlers(
    experiments: ExperimentRepository = Depends(get_experiment_repository),
    file_pairs: FilePairRepository = Depends(get_file_pair_repository),
    identity: IdentityResolver = Depends(get_identity),
) -> FilePairHandlers:
    return FilePairHandlers(experiments, file_pairs, identity)


def get_user_handlers(
    users: UserRepository = Depends(get_user_repository),
    identity: IdentityResolver = Depends(get_identity),
) -> UserHandlers:
    return UserHandlers(users, identity)
