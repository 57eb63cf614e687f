# Standard library imports
from collections import defaultdict
from collections.abc import Sequence
from typing import Any
from uuid import UUID

# Third-party imports
from sqlalchemy import Row, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.attributes import set_committed_value

# Local application imports
from app.core.monitoring.logging import get_logger
from app.models.issues.community_note import CommunityNote
from app.models.issues.issue import Issue, IssueCategory, IssueStatus
from app.schemas.issues.issue_schemas import BoundingBox, IssueCreate, IssueStatusUpdate
from app.services.exceptions import NotFoundError
from app.settings import settings
from app.utils.model_utils import update_model_fields

logger = get_logger(__name__)


def build_issue_filters(
    state: str | None = None,
    city: str | None = None,
    category: IssueCategory | None = None,
    status: IssueStatus | None = None,
) -> list[Any]:
    """Exact-match filters; state and city are compared as given, without normalization."""
    filters = []
    if state:
        filters.append(Issue.state == state)
    if city:
        filters.append(Issue.city == city)
    if category:
        filters.append(Issue.category == category)
    if status:
        filters.append(Issue.status == status)
    return filters


async def create_issue(db: AsyncSession, issue_data: IssueCreate) -> Issue:
    """
    Persist a new issue report.

    New issues always start as REPORTED with no upvotes, whatever the caller sends.
    Latitude and longitude are stored as given.
    """
    new_issue = Issue(**issue_data.model_dump(), status=IssueStatus.REPORTED, upvotes=0)
    db.add(new_issue)

    try:
        await db.commit()
    except Exception as e:
        await db.rollback()
        raise e

    await db.refresh(new_issue)
    logger.info(f"Issue {new_issue.id} reported in {new_issue.city}, {new_issue.state} ({new_issue.category.value})")
    return new_issue


async def get_issue(db: AsyncSession, issue_id: UUID) -> Issue:
    """Fetch an issue with all of its community notes, newest first."""
    result = await db.execute(
        select(Issue)
        .options(selectinload(Issue.community_notes))
        .where(Issue.id == issue_id)
        .execution_options(populate_existing=True)
    )
    issue = result.scalar_one_or_none()

    if issue is None:
        raise NotFoundError("Issue not found")

    return issue


async def _recent_notes_by_issue(
    db: AsyncSession, issue_ids: Sequence[UUID], limit: int
) -> dict[UUID, list[CommunityNote]]:
    if not issue_ids:
        return {}

    rank = (
        func.row_number()
        .over(partition_by=CommunityNote.issue_id, order_by=CommunityNote.created_at.desc())
        .label("rank")
    )
    ranked = select(CommunityNote.id, rank).where(CommunityNote.issue_id.in_(issue_ids)).subquery()

    result = await db.execute(
        select(CommunityNote)
        .join(ranked, CommunityNote.id == ranked.c.id)
        .where(ranked.c.rank <= limit)
        .order_by(CommunityNote.issue_id, CommunityNote.created_at.desc())
    )

    notes_by_issue: dict[UUID, list[CommunityNote]] = defaultdict(list)
    for note in result.scalars().all():
        notes_by_issue[note.issue_id].append(note)
    return notes_by_issue


async def list_issues_by_bounds(
    db: AsyncSession,
    bounds: BoundingBox,
    category: IssueCategory | None = None,
    status: IssueStatus | None = None,
    notes_limit: int | None = None,
) -> list[Issue]:
    """
    List issues whose position lies inside the box, edges included.

    Each issue carries only its most recent community notes. The box is a plain
    latitude/longitude range, so boxes crossing the antimeridian are not supported.
    """
    if notes_limit is None:
        notes_limit = settings.BOUNDS_NOTES_LIMIT

    query = (
        select(Issue)
        .where(
            Issue.latitude.between(bounds.south_west.lat, bounds.north_east.lat),
            Issue.longitude.between(bounds.south_west.lng, bounds.north_east.lng),
            *build_issue_filters(category=category, status=status),
        )
        .order_by(Issue.created_at.desc())
        .execution_options(populate_existing=True)
    )
    result = await db.execute(query)
    issues = list(result.scalars().all())

    notes_by_issue = await _recent_notes_by_issue(db, [issue.id for issue in issues], notes_limit)
    for issue in issues:
        # Attach the capped list without marking the collection as modified
        set_committed_value(issue, "community_notes", notes_by_issue.get(issue.id, []))

    return issues


async def list_issues_by_location(
    db: AsyncSession,
    state: str | None = None,
    city: str | None = None,
    category: IssueCategory | None = None,
    status: IssueStatus | None = None,
    skip: int = 0,
    take: int | None = None,
) -> list[Issue]:
    """List issues newest first, with every community note attached."""
    if take is None:
        take = settings.ISSUES_DEFAULT_TAKE

    query = select(Issue).options(selectinload(Issue.community_notes))

    filters = build_issue_filters(state=state, city=city, category=category, status=status)
    if filters:
        query = query.where(*filters)

    query = (
        query.order_by(Issue.created_at.desc())
        .offset(skip)
        .limit(take)
        .execution_options(populate_existing=True)
    )

    result = await db.execute(query)
    return list(result.scalars().all())


async def list_issue_categories_and_statuses(
    db: AsyncSession,
    state: str | None = None,
    city: str | None = None,
    category: IssueCategory | None = None,
    status: IssueStatus | None = None,
) -> Sequence[Row[tuple[IssueCategory, IssueStatus]]]:
    """Only the columns the analytics view needs, for every matching issue."""
    query = select(Issue.category, Issue.status)

    filters = build_issue_filters(state=state, city=city, category=category, status=status)
    if filters:
        query = query.where(*filters)

    result = await db.execute(query)
    return result.all()


async def update_issue_status(db: AsyncSession, issue_id: UUID, status_data: IssueStatusUpdate) -> Issue:
    """
    Set an issue's status.

    Any status may follow any other; there is no transition graph.
    """
    result = await db.execute(
        select(Issue).where(Issue.id == issue_id).execution_options(populate_existing=True)
    )
    issue = result.scalar_one_or_none()

    if issue is None:
        raise NotFoundError("Issue not found")

    previous_status = issue.status
    update_model_fields(issue, status_data)

    try:
        await db.commit()
    except Exception as e:
        await db.rollback()
        raise e

    await db.refresh(issue)
    logger.info(f"Issue {issue.id} status changed from {previous_status.value} to {issue.status.value}")
    return issue
