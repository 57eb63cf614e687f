# Third-party imports
from fastapi import Query

# Local application imports
from app.schemas.issues.issue_schemas import BoundingBox, Coordinates
from app.settings import settings


def get_bounding_box(
    ne_lat: float = Query(..., description="Latitude of the north-east corner"),
    ne_lng: float = Query(..., description="Longitude of the north-east corner"),
    sw_lat: float = Query(..., description="Latitude of the south-west corner"),
    sw_lng: float = Query(..., description="Longitude of the south-west corner"),
) -> BoundingBox:
    """Map viewport corners from query parameters"""
    return BoundingBox(
        north_east=Coordinates(lat=ne_lat, lng=ne_lng),
        south_west=Coordinates(lat=sw_lat, lng=sw_lng),
    )


class OffsetPagination:
    """skip/take query parameters, with take capped by ISSUES_MAX_TAKE"""

    def __init__(
        self,
        skip: int = Query(0, ge=0),
        take: int = Query(settings.ISSUES_DEFAULT_TAKE, ge=1, le=settings.ISSUES_MAX_TAKE),
    ):
        self.skip = skip
        self.take = take
