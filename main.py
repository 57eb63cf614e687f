# Standard library imports
from contextlib import asynccontextmanager

# Third-party imports
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from sqlalchemy import text

# Local application imports
from app.api import router as api_router
from app.api.internal.utils.exceptions import register_exception_handlers
from app.core.db import AsyncSessionLocal
from app.core.monitoring.logging import get_logger
from app.core.monitoring.sentry import setup_sentry
from app.settings import settings

# Set up the main application logger
logger = get_logger("app")

APP_VERSION = "1.0.0"

if setup_sentry():
    logger.info(f"Sentry initialized in {settings.ENVIRONMENT} environment")


# ---- FASTAPI APP CREATION ----
def custom_generate_unique_id(route: APIRoute) -> str:
    # Handle routes without tags
    if route.tags and len(route.tags) > 0:
        return f"{route.tags[0]}-{route.name}"
    else:
        return route.name or "unnamed_route"


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        logger.info("Starting up FastAPI application")
        yield
        logger.info("Shutting down FastAPI application")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=APP_VERSION,
        description="Report civic issues on a map, add community notes and upvote what matters",
        openapi_url=f"{settings.API_V1_STR}/openapi.json" if settings.ENVIRONMENT != "production" else None,
        docs_url=f"{settings.API_V1_STR}/docs" if settings.ENVIRONMENT != "production" else None,
        redoc_url=f"{settings.API_V1_STR}/redoc" if settings.ENVIRONMENT != "production" else None,
        generate_unique_id_function=custom_generate_unique_id,
        lifespan=lifespan,
    )

    if settings.all_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.all_cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        try:
            async with AsyncSessionLocal() as db:
                await db.execute(text("SELECT 1"))
            database = "connected"
        except Exception as e:
            logger.error(f"Health check could not reach the database: {e}")
            database = "unavailable"
        return {"status": "healthy", "version": APP_VERSION, "database": database}

    app.include_router(api_router)

    return app


# Create the app instance
app = create_app()
