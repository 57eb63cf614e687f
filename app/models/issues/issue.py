# Standard library imports
import enum

# Third-party imports
from sqlalchemy import JSON, Column, Enum as SQLEnum, Float, Integer, String, Text
from sqlalchemy.orm import relationship

# Local application imports
from app.models.base import Base
from app.models.mixins.uuid_timestamp import UUIDTimeStampMixin


class IssueStatus(str, enum.Enum):
    REPORTED = "REPORTED"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"


class IssueCategory(str, enum.Enum):
    CORRUPTION = "CORRUPTION"
    POTHOLE = "POTHOLE"
    WATER = "WATER"
    ELECTRICITY = "ELECTRICITY"
    DOMESTIC_VIOLENCE = "DOMESTIC_VIOLENCE"
    CRIME = "CRIME"
    SANITATION = "SANITATION"
    EDUCATION = "EDUCATION"
    HEALTHCARE = "HEALTHCARE"
    ENVIRONMENT = "ENVIRONMENT"
    OTHER = "OTHER"


class Issue(Base, UUIDTimeStampMixin):
    __tablename__ = "issues"

    # Issue details
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(SQLEnum(IssueCategory, name="issue_category"), nullable=False, index=True)
    status = Column(
        SQLEnum(IssueStatus, name="issue_status"),
        nullable=False,
        default=IssueStatus.REPORTED,
        index=True,
    )

    # Location information, as picked on the map and reverse-geocoded by the client
    latitude = Column(Float, nullable=False, index=True)
    longitude = Column(Float, nullable=False, index=True)
    state = Column(String(100), nullable=False, index=True)
    city = Column(String(100), nullable=False, index=True)
    area = Column(String(200), nullable=True)
    pincode = Column(String(20), nullable=True)

    # Media
    image_urls = Column(JSON, nullable=False, default=list)

    # Reporter and voting
    created_by = Column(String(255), nullable=False)
    upvotes = Column(Integer, nullable=False, default=0, index=True)

    community_notes = relationship(
        "CommunityNote",
        back_populates="issue",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="CommunityNote.created_at.desc()",
    )
    upvote_records = relationship(
        "IssueUpvote",
        back_populates="issue",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
