# Standard library imports
from types import SimpleNamespace

# Local application imports
from app.models.issues.issue import IssueCategory, IssueStatus
from app.services.issues import aggregate_issue_stats


def issue(category: IssueCategory, status: IssueStatus | str) -> SimpleNamespace:
    return SimpleNamespace(category=category, status=status)


def test_counts_per_category_sorted_by_total():
    analytics = aggregate_issue_stats(
        [
            issue(IssueCategory.WATER, IssueStatus.IN_PROGRESS),
            issue(IssueCategory.POTHOLE, IssueStatus.RESOLVED),
            issue(IssueCategory.POTHOLE, IssueStatus.REPORTED),
        ]
    )

    assert [stats.category for stats in analytics.categories] == [IssueCategory.POTHOLE, IssueCategory.WATER]
    pothole, water = analytics.categories
    assert (pothole.total, pothole.resolved, pothole.in_progress, pothole.reported) == (2, 1, 0, 1)
    assert (water.total, water.resolved, water.in_progress, water.reported) == (1, 0, 1, 0)


def test_grand_totals_and_resolution_rate():
    analytics = aggregate_issue_stats(
        [
            issue(IssueCategory.CRIME, IssueStatus.RESOLVED),
            issue(IssueCategory.CRIME, IssueStatus.REPORTED),
            issue(IssueCategory.HEALTHCARE, IssueStatus.RESOLVED),
        ]
    )

    assert analytics.total_issues == 3
    assert analytics.resolved_issues == 2
    assert analytics.resolution_rate == 66.67


def test_unmodelled_status_counts_as_reported():
    analytics = aggregate_issue_stats([issue(IssueCategory.SANITATION, "ESCALATED")])

    (sanitation,) = analytics.categories
    assert sanitation.reported == 1
    assert sanitation.total == 1


def test_empty_input():
    analytics = aggregate_issue_stats([])

    assert analytics.categories == []
    assert analytics.total_issues == 0
    assert analytics.resolved_issues == 0
    assert analytics.resolution_rate == 0
