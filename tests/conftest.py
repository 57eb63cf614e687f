# Standard library imports
from collections.abc import AsyncGenerator, Awaitable, Callable
import os
from typing import Any

# Settings are read at import time; point them at an in-memory database first
os.environ["ENVIRONMENT"] = "dev"
os.environ["POSTGRES_SERVER"] = "localhost"
os.environ["POSTGRES_PORT"] = "5432"
os.environ["POSTGRES_USER"] = "postgres"
os.environ["POSTGRES_PASSWORD"] = "postgres"
os.environ["POSTGRES_DB"] = "trackmygov_test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"

# Third-party imports
from httpx import ASGITransport, AsyncClient  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

# Local application imports
from app.core.db import get_async_session  # noqa: E402
from app.core.db.sqlite_engine import enable_sqlite_foreign_keys  # noqa: E402
from app.models import Base, Issue  # noqa: E402
from app.models.issues.issue import IssueCategory  # noqa: E402
from app.schemas.issues.issue_schemas import IssueCreate  # noqa: E402
from app.services.issues import create_issue  # noqa: E402
from main import app as fastapi_app  # noqa: E402


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(test_engine)

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_engine

    await test_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncClient, None]:
    async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_async_session] = override_get_async_session
    async with AsyncClient(transport=ASGITransport(app=fastapi_app), base_url="http://test") as test_client:
        yield test_client
    fastapi_app.dependency_overrides.clear()


def build_issue_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "title": "Deep pothole near the bus stand",
        "description": "A pothole about a foot deep has opened up in the left lane.",
        "category": IssueCategory.POTHOLE.value,
        "latitude": 9.9312,
        "longitude": 76.2673,
        "state": "Kerala",
        "city": "Kochi",
        "area": "Vyttila",
        "pincode": "682019",
        "image_urls": ["https://images.example.org/pothole-1.jpg"],
        "created_by": "citizen-1",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def issue_payload() -> Callable[..., dict[str, Any]]:
    return build_issue_payload


@pytest.fixture
def issue_factory(db: AsyncSession) -> Callable[..., Awaitable[Issue]]:
    async def _create(**overrides: Any) -> Issue:
        return await create_issue(db, IssueCreate(**build_issue_payload(**overrides)))

    return _create
