# Third-party imports
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from app.core.db import get_async_session
from app.models.issues.issue import IssueCategory, IssueStatus
from app.schemas.issues.analytics_schemas import IssueAnalytics
from app.services.issues import aggregate_issue_stats, list_issue_categories_and_statuses

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get("/issues", response_model=IssueAnalytics)
async def get_issue_analytics(
    state: str | None = None,
    city: str | None = None,
    category: IssueCategory | None = None,
    status: IssueStatus | None = None,
    db: AsyncSession = Depends(get_async_session),
):
    """Issue counts per category and status"""
    rows = await list_issue_categories_and_statuses(db, state=state, city=city, category=category, status=status)
    return aggregate_issue_stats(rows)
