# Standard library imports
from uuid import UUID

# Third-party imports
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from app.core.db import get_async_session
from app.dependancies.common import OffsetPagination, get_bounding_box
from app.models.issues.issue import IssueCategory, IssueStatus
from app.schemas.issues.issue_schemas import (
    BoundingBox,
    IssueCreate,
    IssueResponse,
    IssueStatusUpdate,
    IssueWithNotesResponse,
)
from app.schemas.issues.upvote_schemas import UpvoteToggle
from app.services.issues import (
    create_issue,
    get_issue,
    list_issues_by_bounds,
    list_issues_by_location,
    toggle_upvote,
    update_issue_status,
)

router = APIRouter(prefix="/issues", tags=["Issues"])


@router.post("/", response_model=IssueResponse)
async def report_issue(issue_data: IssueCreate, db: AsyncSession = Depends(get_async_session)):
    """Create a new issue report"""
    issue = await create_issue(db, issue_data)
    return IssueResponse.model_validate(issue)


@router.get("/", response_model=list[IssueWithNotesResponse])
async def list_issues(
    state: str | None = None,
    city: str | None = None,
    category: IssueCategory | None = None,
    status: IssueStatus | None = None,
    pagination: OffsetPagination = Depends(),
    db: AsyncSession = Depends(get_async_session),
):
    """List issues by state/city, newest first, with all their notes"""
    issues = await list_issues_by_location(
        db,
        state=state,
        city=city,
        category=category,
        status=status,
        skip=pagination.skip,
        take=pagination.take,
    )
    return [IssueWithNotesResponse.model_validate(issue) for issue in issues]


@router.get("/bounds", response_model=list[IssueWithNotesResponse])
async def list_issues_in_bounds(
    category: IssueCategory | None = None,
    status: IssueStatus | None = None,
    bounds: BoundingBox = Depends(get_bounding_box),
    db: AsyncSession = Depends(get_async_session),
):
    """List issues inside the map viewport, each with its latest notes"""
    issues = await list_issues_by_bounds(db, bounds, category=category, status=status)
    return [IssueWithNotesResponse.model_validate(issue) for issue in issues]


@router.get("/{issue_id}", response_model=IssueWithNotesResponse)
async def get_issue_details(issue_id: UUID, db: AsyncSession = Depends(get_async_session)):
    """Get issue details"""
    issue = await get_issue(db, issue_id)
    return IssueWithNotesResponse.model_validate(issue)


@router.post("/{issue_id}/upvote", response_model=IssueResponse)
async def upvote_issue(
    issue_id: UUID,
    upvote_data: UpvoteToggle,
    db: AsyncSession = Depends(get_async_session),
):
    """Toggle the caller's upvote on an issue"""
    issue = await toggle_upvote(db, issue_id, upvote_data.user_id)
    return IssueResponse.model_validate(issue)


@router.patch("/{issue_id}/status", response_model=IssueResponse)
async def change_issue_status(
    issue_id: UUID,
    status_data: IssueStatusUpdate,
    db: AsyncSession = Depends(get_async_session),
):
    """Update issue status"""
    issue = await update_issue_status(db, issue_id, status_data)
    return IssueResponse.model_validate(issue)
