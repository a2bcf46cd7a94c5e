"""Shared fixtures: in-memory SQLite database and an HTTP client for the app."""

import os

# Must be set before jobtracker.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from jobtracker.config import Settings, get_settings
from jobtracker.main import app
from jobtracker.models import Base
from jobtracker.models.base import enable_sqlite_foreign_keys, get_db

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def engine():
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(test_engine)
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
async def client(session_factory, upload_dir):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    def override_get_settings():
        return Settings(database_url=TEST_DATABASE_URL, upload_dir=str(upload_dir), max_upload_mb=1)

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = override_get_settings
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# --- Record helpers ---

@pytest.fixture
def create_company(client):
    async def _create(name="Acme Corp", **fields):
        response = await client.post("/api/v1/companies", json={"name": name, **fields})
        assert response.status_code == 201, response.text
        return response.json()
    return _create


@pytest.fixture
def create_application(client, create_company):
    async def _create(company_id=None, position_title="Backend Engineer", **fields):
        if company_id is None:
            company_id = (await create_company())["id"]
        response = await client.post(
            "/api/v1/applications",
            json={"company_id": company_id, "position_title": position_title, **fields},
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _create


@pytest.fixture
def create_contact(client, create_company):
    async def _create(company_id=None, name="Jane Doe", **fields):
        if company_id is None:
            company_id = (await create_company())["id"]
        response = await client.post(
            "/api/v1/contacts",
            json={"company_id": company_id, "name": name, **fields},
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _create


@pytest.fixture
def create_event(client):
    async def _create(title="Recruiter call", scheduled_date="2030-03-14T15:00:00Z", **fields):
        response = await client.post(
            "/api/v1/events",
            json={"title": title, "scheduled_date": scheduled_date, **fields},
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _create
