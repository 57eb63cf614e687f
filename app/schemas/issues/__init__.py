from .analytics_schemas import CategoryStats, IssueAnalytics
from .community_note_schemas import CommunityNoteCreate, CommunityNoteRate, CommunityNoteResponse
from .issue_schemas import (
    BoundingBox,
    Coordinates,
    IssueCreate,
    IssueResponse,
    IssueStatusUpdate,
    IssueWithNotesResponse,
)
from .upvote_schemas import UpvoteToggle

__all__ = [
    "BoundingBox",
    "CategoryStats",
    "CommunityNoteCreate",
    "CommunityNoteRate",
    "CommunityNoteResponse",
    "Coordinates",
    "IssueAnalytics",
    "IssueCreate",
    "IssueResponse",
    "IssueStatusUpdate",
    "IssueWithNotesResponse",
    "UpvoteToggle",
]
