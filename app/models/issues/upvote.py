# Third-party imports
from sqlalchemy import Column, ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

# Local application imports
from app.models.base import Base
from app.models.mixins.uuid_timestamp import UUIDTimeStampMixin


class IssueUpvote(Base, UUIDTimeStampMixin):
    __tablename__ = "issue_upvotes"
    __table_args__ = (UniqueConstraint("issue_id", "user_id", name="unique_issue_user_upvote"),)

    issue_id = Column(Uuid(as_uuid=True), ForeignKey("issues.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(255), nullable=False)  # client-generated pseudo-identity

    issue = relationship("Issue", back_populates="upvote_records")
