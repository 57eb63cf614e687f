"""
Pydantic schemas package.

This package contains all Pydantic schemas for request/response
validation and serialization.
"""

# Local application imports
from app.schemas.common import BaseResponse, ErrorDetails
from app.schemas.issues import (
    BoundingBox,
    CategoryStats,
    CommunityNoteCreate,
    CommunityNoteRate,
    CommunityNoteResponse,
    Coordinates,
    IssueAnalytics,
    IssueCreate,
    IssueResponse,
    IssueStatusUpdate,
    IssueWithNotesResponse,
    UpvoteToggle,
)

__all__ = [
    # Common schemas
    "BaseResponse",
    "ErrorDetails",
    # Issue schemas
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
