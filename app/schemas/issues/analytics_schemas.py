# Third-party imports
from pydantic import BaseModel

# Local application imports
from app.models.issues.issue import IssueCategory


class CategoryStats(BaseModel):
    category: IssueCategory
    total: int = 0
    resolved: int = 0
    in_progress: int = 0
    reported: int = 0


class IssueAnalytics(BaseModel):
    total_issues: int
    resolved_issues: int
    resolution_rate: float
    categories: list[CategoryStats]
