# Local application imports
from app.services.issues.analytics_services import aggregate_issue_stats
from app.services.issues.community_note_services import (
    create_community_note,
    delete_community_note,
    list_community_notes,
    rate_community_note,
)
from app.services.issues.issue_services import (
    create_issue,
    get_issue,
    list_issue_categories_and_statuses,
    list_issues_by_bounds,
    list_issues_by_location,
    update_issue_status,
)
from app.services.issues.upvote_services import toggle_upvote

__all__ = [
    "aggregate_issue_stats",
    "create_community_note",
    "create_issue",
    "delete_community_note",
    "get_issue",
    "list_community_notes",
    "list_issue_categories_and_statuses",
    "list_issues_by_bounds",
    "list_issues_by_location",
    "rate_community_note",
    "toggle_upvote",
    "update_issue_status",
]
