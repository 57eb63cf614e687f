# Standard library imports
import asyncio
from collections.abc import AsyncGenerator
import uuid

# Third-party imports
import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

# Local application imports
from app.core.db.sqlite_engine import enable_sqlite_foreign_keys
from app.models import Base, Issue
from app.models.issues.upvote import IssueUpvote
from app.schemas.issues.issue_schemas import IssueCreate
from app.services.exceptions import NotFoundError, ReferentialIntegrityError
from app.services.issues import create_issue, get_issue, toggle_upvote


async def count_upvotes(db: AsyncSession, issue_id: uuid.UUID) -> int:
    result = await db.execute(select(func.count(IssueUpvote.id)).where(IssueUpvote.issue_id == issue_id))
    return result.scalar() or 0


@pytest_asyncio.fixture
async def file_session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    # Concurrent writers need separate connections to one database file
    file_engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'upvotes.db'}",
        poolclass=NullPool,
        connect_args={"timeout": 30},
    )
    enable_sqlite_foreign_keys(file_engine)

    async with file_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(bind=file_engine, class_=AsyncSession, expire_on_commit=False)

    await file_engine.dispose()


async def toggle_in_own_session(factory: async_sessionmaker[AsyncSession], issue_id: uuid.UUID, user_id: str) -> Issue:
    async with factory() as session:
        return await toggle_upvote(session, issue_id, user_id)


async def test_first_upvote_adds_one(db, issue_factory):
    issue = await issue_factory()

    upvoted = await toggle_upvote(db, issue.id, "user-a")

    assert upvoted.upvotes == 1
    assert await count_upvotes(db, issue.id) == 1


async def test_second_upvote_by_same_user_takes_it_back(db, issue_factory):
    issue = await issue_factory()

    await toggle_upvote(db, issue.id, "user-a")
    toggled_back = await toggle_upvote(db, issue.id, "user-a")

    assert toggled_back.upvotes == 0
    assert await count_upvotes(db, issue.id) == 0


@pytest.mark.parametrize("times", [1, 3, 5])
async def test_odd_number_of_toggles_leaves_one_upvote(db, issue_factory, times):
    issue = await issue_factory()

    for _ in range(times):
        issue = await toggle_upvote(db, issue.id, "user-a")

    assert issue.upvotes == 1


async def test_counter_matches_upvote_rows_across_users(db, issue_factory):
    issue = await issue_factory()
    other = await issue_factory(title="Broken street light")
    actions = ["user-a", "user-b", "user-c", "user-b", "user-d", "user-a", "user-b"]

    for user_id in actions:
        issue = await toggle_upvote(db, issue.id, user_id)
    await toggle_upvote(db, other.id, "user-a")

    # user-a twice, user-b three times, user-c and user-d once
    assert issue.upvotes == 3
    assert await count_upvotes(db, issue.id) == issue.upvotes
    assert (await get_issue(db, other.id)).upvotes == 1


async def test_toggle_on_missing_issue_writes_nothing(db):
    with pytest.raises(NotFoundError):
        await toggle_upvote(db, uuid.uuid4(), "user-a")

    result = await db.execute(select(func.count(IssueUpvote.id)))
    assert result.scalar() == 0


async def test_toggle_keeps_one_row_per_user_and_issue(db, issue_factory):
    issue = await issue_factory()

    await toggle_upvote(db, issue.id, "user-a")
    await toggle_upvote(db, issue.id, "user-b")

    result = await db.execute(
        select(IssueUpvote.user_id).where(IssueUpvote.issue_id == issue.id).order_by(IssueUpvote.user_id)
    )
    assert list(result.scalars().all()) == ["user-a", "user-b"]


async def test_concurrent_upvotes_from_many_users_are_all_counted(file_session_factory, issue_payload):
    async with file_session_factory() as session:
        issue = await create_issue(session, IssueCreate(**issue_payload()))

    users = [f"user-{n}" for n in range(20)]
    await asyncio.gather(*(toggle_in_own_session(file_session_factory, issue.id, user_id) for user_id in users))

    async with file_session_factory() as session:
        stored = await get_issue(session, issue.id)
        assert stored.upvotes == len(users)
        assert await count_upvotes(session, issue.id) == len(users)


async def test_concurrent_toggles_by_one_user_keep_counter_consistent(file_session_factory, issue_payload):
    async with file_session_factory() as session:
        issue = await create_issue(session, IssueCreate(**issue_payload()))

    results = await asyncio.gather(
        toggle_in_own_session(file_session_factory, issue.id, "user-a"),
        toggle_in_own_session(file_session_factory, issue.id, "user-a"),
        return_exceptions=True,
    )

    # Either both toggles ran in turn (net zero) or the second insert lost the race
    assert all(isinstance(result, (Issue, ReferentialIntegrityError)) for result in results), results
    async with file_session_factory() as session:
        stored = await get_issue(session, issue.id)
        rows = await count_upvotes(session, issue.id)
    assert stored.upvotes == rows
    assert rows in (0, 1)
