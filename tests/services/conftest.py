"""Service test fixtures: async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched for the readiness probe
    - client sends the identity header of USER_ID; anon_client sends none

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so rows committed
      by fixtures are visible to requests
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from code_annotation.core.domain_types import Role
from code_annotation.db.base import Base
from code_annotation.infrastructure.database import get_db, DatabaseSessionManager
from code_annotation.models import Assignment, Experiment, FilePair, User
import code_annotation.infrastructure.database as db_module
from code_annotation.main import app

USER_ID = 1
OTHER_USER_ID = 2
IDENTITY = {"X-User-Id": str(USER_ID)}


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def app_with_db(test_engine, test_session_factory):
    """The app with its DB dependency pointed at the test database."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    yield app

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def client(app_with_db):
    """Test client authenticated as USER_ID."""
    async with AsyncClient(
        transport=ASGITransport(app=app_with_db), base_url="http://test",
        headers=IDENTITY,
    ) as c:
        yield c


@pytest.fixture
async def anon_client(app_with_db):
    """Test client without identity header."""
    async with AsyncClient(
        transport=ASGITransport(app=app_with_db), base_url="http://test",
    ) as c:
        yield c


# ─── Seed helpers ───────────────────────────────────────────────

@pytest.fixture
async def users(test_db):
    """The caller (USER_ID, worker) and a requester."""
    caller = User(
        id=USER_ID, login="alice", username="Alice Doe",
        avatar_url="https://avatars.example.com/alice.png", role=Role.WORKER,
    )
    other = User(
        id=OTHER_USER_ID, login="bob", username="Bob Roe",
        avatar_url="", role=Role.REQUESTER,
    )
    test_db.add_all([caller, other])
    await test_db.commit()
    return caller, other


@pytest.fixture
def seed(test_db):
    """Factory helpers that insert rows and return them."""

    class _Seed:
        async def experiment(self, name="exp", description="desc") -> Experiment:
            experiment = Experiment(name=name, description=description)
            test_db.add(experiment)
            await test_db.commit()
            await test_db.refresh(experiment)
            return experiment

        async def file_pair(self, experiment: Experiment, n: int = 0) -> FilePair:
            fp = FilePair(
                experiment_id=experiment.id, score=0.5,
                left_blob_id=f"left{n}", left_path=f"src/a{n}.go",
                left_content="package a\n",
                right_blob_id=f"right{n}", right_path=f"src/b{n}.go",
                right_content="package b\n",
            )
            test_db.add(fp)
            await test_db.commit()
            await test_db.refresh(fp)
            return fp

        async def assignment(
            self, experiment: Experiment, pair: FilePair,
            user_id: int = USER_ID, answer: str | None = None, duration: int = 0,
        ) -> Assignment:
            assignment = Assignment(
                experiment_id=experiment.id, pair_id=pair.id, user_id=user_id,
                answer=answer, duration=duration,
            )
            test_db.add(assignment)
            await test_db.commit()
            await test_db.refresh(assignment)
            return assignment

    return _Seed()
