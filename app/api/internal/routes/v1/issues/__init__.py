from .analytics_routes import router as analytics_router
from .community_note_routes import router as community_note_router
from .issue_routes import router as issue_router

__all__ = ["analytics_router", "community_note_router", "issue_router"]
