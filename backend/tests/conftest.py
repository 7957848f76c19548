"""Pytest configuration and shared fixtures."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from application.services import ApplicationLifecycleManager
from domain.entities import Application
from domain.enums import UserRole
from domain.value_objects import Actor, FormData
from infrastructure.database import Base, create_session_factory
from infrastructure.database import models  # noqa: F401
from infrastructure.database.unit_of_work import SQLAlchemyUnitOfWork
from presentation.api.dependencies import get_db_session
from presentation.app import create_app


OWNER_ID = 42
ADMIN_ID = 7
STRANGER_ID = 99


@pytest.fixture
def owner():
    """Fixture for the applicant owning the test applications."""
    return Actor(user_id=OWNER_ID)


@pytest.fixture
def admin():
    """Fixture for a reviewer with administrative authority."""
    return Actor(user_id=ADMIN_ID, role=UserRole.ADMIN)


@pytest.fixture
def stranger():
    """Fixture for an applicant who owns nothing."""
    return Actor(user_id=STRANGER_ID)


@pytest.fixture
def draft_application():
    """Fixture for an unsaved draft application."""
    return Application(
        owner_id=OWNER_ID,
        form_data=FormData({"personalInfo": {"firstName": "Ada", "lastName": "Lovelace"}}),
    )


@pytest_asyncio.fixture
async def engine(tmp_path):
    """SQLite database with the full schema, one file per test."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'admissions_test.db'}",
        poolclass=NullPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def uow(session):
    return SQLAlchemyUnitOfWork(session)


@pytest.fixture
def manager(uow):
    return ApplicationLifecycleManager(uow)


@pytest_asyncio.fixture
async def client(session_factory):
    """HTTP client talking to the app with its database pointed at the test engine."""
    app = create_app()

    async def override_db_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_db_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
