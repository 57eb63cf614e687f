# Local application imports
from app.models.issues.issue import Issue, IssueCategory, IssueStatus
from app.models.issues.community_note import CommunityNote, NoteRating
from app.models.issues.upvote import IssueUpvote

__all__ = [
    "CommunityNote",
    "Issue",
    "IssueCategory",
    "IssueStatus",
    "IssueUpvote",
    "NoteRating",
]
