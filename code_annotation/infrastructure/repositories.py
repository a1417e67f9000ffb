"""SQL Repositories: SQLAlchemy implementations of the core repository protocols.

Invariants:
    - One AsyncSession per repository instance (the request's session)
    - Every SQLAlchemyError leaves as RepositoryError(operation, cause)
    - Missing rows -> None, never an exception
    - Listings are ordered by id
"""

import functools
from typing import Awaitable, Callable, ParamSpec, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from code_annotation.core.domain_types import (
    AssignmentId, ExperimentId, FilePairId, UserId,
)
from code_annotation.core.errors import RepositoryError
from code_annotation.models.assignment import Assignment
from code_annotation.models.experiment import Experiment
from code_annotation.models.file_pair import FilePair
from code_annotation.models.user import User

P = ParamSpec("P")
R = TypeVar("R")


def _translate_errors(
    operation: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Re-raise SQLAlchemy faults of the wrapped coroutine as RepositoryError."""
    def decorator(fn: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @functools.wraps(fn)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return await fn(*args, **kwargs)
            except SQLAlchemyError as e:
                raise RepositoryError(operation, e) from e
        return wrapper
    return decorator


class SqlExperimentRepository:

    def __init__(self, db: AsyncSession):
        self.db = db

    @_translate_errors("get experiment")
    async def get_by_id(self, experiment_id: ExperimentId) -> Experiment | None:
        return await self.db.get(Experiment, experiment_id)

    @_translate_errors("list experiments")
    async def get_all(self) -> list[Experiment]:
        result = await self.db.execute(select(Experiment).order_by(Experiment.id))
        return list(result.scalars().all())

    @_translate_errors("create experiment")
    async def create(self, experiment: Experiment) -> None:
        self.db.add(experiment)
        await self.db.commit()
        await self.db.refresh(experiment)

    @_translate_errors("update experiment")
    async def update(self, experiment: Experiment) -> None:
        self.db.add(experiment)
        await self.db.commit()


class SqlAssignmentRepository:

    def __init__(self, db: AsyncSession):
        self.db = db

    def _user_experiment(self, experiment_id: ExperimentId, user_id: UserId):
        return (
            select(func.count())
            .select_from(Assignment)
            .where(Assignment.experiment_id == experiment_id)
            .where(Assignment.user_id == user_id)
        )

    @_translate_errors("count assignments")
    async def count_user_assignment(
        self, experiment_id: ExperimentId, user_id: UserId,
    ) -> int:
        result = await self.db.execute(self._user_experiment(experiment_id, user_id))
        return result.scalar_one()

    @_translate_errors("count complete assignments")
    async def count_complete_user_assignment(
        self, experiment_id: ExperimentId, user_id: UserId,
    ) -> int:
        query = self._user_experiment(experiment_id, user_id).where(
            Assignment.answer.is_not(None),
        )
        result = await self.db.execute(query)
        return result.scalar_one()

    @_translate_errors("list assignments")
    async def get_for_user_experiment(
        self, experiment_id: ExperimentId, user_id: UserId,
    ) -> list[Assignment]:
        result = await self.db.execute(
            select(Assignment)
            .where(Assignment.experiment_id == experiment_id)
            .where(Assignment.user_id == user_id)
            .order_by(Assignment.id)
        )
        return list(result.scalars().all())

    @_translate_errors("get assignment")
    async def get_by_id(self, assignment_id: AssignmentId) -> Assignment | None:
        return await self.db.get(Assignment, assignment_id)

    @_translate_errors("update assignment")
    async def update(self, assignment: Assignment) -> None:
        self.db.add(assignment)
        await self.db.commit()

    @_translate_errors("list answers")
    async def get_answers_for_pair(
        self, experiment_id: ExperimentId, pair_id: FilePairId,
    ) -> list[str | None]:
        result = await self.db.execute(
            select(Assignment.answer)
            .where(Assignment.experiment_id == experiment_id)
            .where(Assignment.pair_id == pair_id)
        )
        return list(result.scalars().all())


class SqlFilePairRepository:

    def __init__(self, db: AsyncSession):
        self.db = db

    @_translate_errors("list file pairs")
    async def get_all_by_experiment(
        self, experiment_id: ExperimentId,
    ) -> list[FilePair]:
        result = await self.db.execute(
            select(FilePair)
            .where(FilePair.experiment_id == experiment_id)
            .order_by(FilePair.id)
        )
        return list(result.scalars().all())

    @_translate_errors("count file pairs")
    async def count_by_experiment(self, experiment_id: ExperimentId) -> int:
        result = await self.db.execute(
            select(func.count())
            .select_from(FilePair)
            .where(FilePair.experiment_id == experiment_id)
        )
        return result.scalar_one()


class SqlUserRepository:

    def __init__(self, db: AsyncSession):
        self.db = db

    @_translate_errors("get user")
    async def get_by_id(self, user_id: UserId) -> User | None:
        return await self.db.get(User, user_id)
