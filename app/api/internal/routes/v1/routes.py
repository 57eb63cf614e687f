# Third-party imports
from fastapi import APIRouter

# Local application imports
from app.api.internal.routes.v1.issues import analytics_router, community_note_router, issue_router

router = APIRouter()

# Include all internal v1 routers
router.include_router(issue_router)
router.include_router(community_note_router)
router.include_router(analytics_router)
