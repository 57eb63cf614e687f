# Standard library imports
from datetime import datetime
from uuid import UUID

# Third-party imports
from pydantic import BaseModel, ConfigDict, Field

# Local application imports
from app.models.issues.issue import IssueCategory, IssueStatus
from app.schemas.issues.community_note_schemas import CommunityNoteResponse


class IssueCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=10)
    category: IssueCategory
    latitude: float
    longitude: float
    state: str
    city: str
    area: str | None = None
    pincode: str | None = None
    image_urls: list[str] = Field(default_factory=list)
    created_by: str


class IssueStatusUpdate(BaseModel):
    status: IssueStatus


class Coordinates(BaseModel):
    lat: float
    lng: float


class BoundingBox(BaseModel):
    north_east: Coordinates
    south_west: Coordinates


class IssueResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str
    category: IssueCategory
    status: IssueStatus
    latitude: float
    longitude: float
    state: str
    city: str
    area: str | None
    pincode: str | None
    image_urls: list[str]
    upvotes: int
    created_by: str
    created_at: datetime
    updated_at: datetime


class IssueWithNotesResponse(IssueResponse):
    community_notes: list[CommunityNoteResponse] = Field(default_factory=list)
