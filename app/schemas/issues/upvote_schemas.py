# Third-party imports
from pydantic import BaseModel, Field


class UpvoteToggle(BaseModel):
    user_id: str = Field(..., min_length=1)
