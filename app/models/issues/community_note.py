# Standard library imports
import enum

# Third-party imports
from sqlalchemy import Column, Enum as SQLEnum, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import relationship

# Local application imports
from app.models.base import Base
from app.models.mixins.uuid_timestamp import UUIDTimeStampMixin


class NoteRating(str, enum.Enum):
    HELPFUL = "HELPFUL"
    PARTIALLY_HELPFUL = "PARTIALLY_HELPFUL"
    NOT_HELPFUL = "NOT_HELPFUL"


class CommunityNote(Base, UUIDTimeStampMixin):
    __tablename__ = "community_notes"

    content = Column(Text, nullable=False)
    issue_id = Column(Uuid(as_uuid=True), ForeignKey("issues.id", ondelete="CASCADE"), nullable=False, index=True)
    created_by = Column(String(255), nullable=False)

    # Last applied rating; null until the note is first rated
    rating = Column(SQLEnum(NoteRating, name="note_rating"), nullable=True)
    helpful = Column(Integer, nullable=False, default=0)
    not_helpful = Column(Integer, nullable=False, default=0)

    issue = relationship("Issue", back_populates="community_notes")
