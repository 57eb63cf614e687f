# Standard library imports
from collections.abc import Iterable
from typing import Protocol

# Local application imports
from app.models.issues.issue import IssueCategory, IssueStatus
from app.schemas.issues.analytics_schemas import CategoryStats, IssueAnalytics


class CategorizedIssue(Protocol):
    category: IssueCategory
    status: IssueStatus


def aggregate_issue_stats(issues: Iterable[CategorizedIssue]) -> IssueAnalytics:
    """
    Count issues per category and status.

    Anything that is neither RESOLVED nor IN_PROGRESS counts as reported.
    Categories without issues are left out and the rest are ordered by total,
    largest first; ties keep the category enumeration order. The grand totals
    are taken over the whole input.
    """
    stats = {category: CategoryStats(category=category) for category in IssueCategory}
    total_issues = 0
    resolved_issues = 0

    for issue in issues:
        total_issues += 1
        if issue.status == IssueStatus.RESOLVED:
            resolved_issues += 1

        category_stats = stats.get(issue.category)
        if category_stats is None:
            continue

        category_stats.total += 1
        if issue.status == IssueStatus.RESOLVED:
            category_stats.resolved += 1
        elif issue.status == IssueStatus.IN_PROGRESS:
            category_stats.in_progress += 1
        else:
            category_stats.reported += 1

    categories = sorted(
        (category_stats for category_stats in stats.values() if category_stats.total > 0),
        key=lambda category_stats: category_stats.total,
        reverse=True,
    )
    resolution_rate = (resolved_issues / total_issues * 100) if total_issues > 0 else 0

    return IssueAnalytics(
        total_issues=total_issues,
        resolved_issues=resolved_issues,
        resolution_rate=round(resolution_rate, 2),
        categories=categories,
    )
