"""
Database models package.

This package contains all SQLAlchemy models for the application.
"""

# Local application imports
from app.models.base import Base
from app.models.issues import CommunityNote, Issue, IssueUpvote

__all__ = [
    "Base",
    "CommunityNote",
    "Issue",
    "IssueUpvote",
]
