# Standard library imports
from datetime import datetime
from uuid import UUID

# Third-party imports
from pydantic import BaseModel, ConfigDict, Field

# Local application imports
from app.models.issues.community_note import NoteRating


class CommunityNoteCreate(BaseModel):
    content: str = Field(..., min_length=10)
    issue_id: UUID
    created_by: str


class CommunityNoteRate(BaseModel):
    rating: NoteRating
    is_helpful: bool


class CommunityNoteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    content: str
    issue_id: UUID
    created_by: str
    rating: NoteRating | None
    helpful: int
    not_helpful: int
    created_at: datetime
