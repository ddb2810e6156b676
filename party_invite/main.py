from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from typing import Optional
import logging

from . import routers
from .config import Settings
from .database import Database
from .dependencies.permissions import get_current_admin
from .logging_config import setup_logging
from .schemas.common import HealthResponse
from .services.event_settings_service import EventSettingsService

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    setup_logging(settings.LOG_LEVEL)

    # Initialize FastAPI app
    app = FastAPI(
        title="Party Invite API",
        description="RSVP collection and admin dashboard API",
        version=VERSION,
    )
    app.state.settings = settings
    app.state.database = Database(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.FRONTEND_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def startup_event():
        """Create tables and the event settings row"""
        logger.info("🚀 Starting Party Invite API...")
        if settings.uses_default_secret:
            logger.warning("JWT_SECRET is the default value; set it in production")

        database: Database = app.state.database
        database.init_db()
        with database.session_scope() as db:
            EventSettingsService(db).ensure_settings()

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("⏹️ Shutting down, closing database connections...")
        app.state.database.dispose()

    # Public routes
    app.include_router(routers.event.router, prefix="/api")
    app.include_router(routers.food_choices.router, prefix="/api")
    app.include_router(routers.rsvps.router, prefix="/api")
    app.include_router(routers.auth.router, prefix="/api/admin")

    # Admin routes
    admin_only = [Depends(get_current_admin)]
    for admin_router in (
        routers.event.admin_router,
        routers.food_choices.admin_router,
        routers.invites.admin_router,
        routers.rsvps.admin_router,
        routers.metrics.admin_router,
    ):
        app.include_router(admin_router, prefix="/api/admin", dependencies=admin_only)

    @app.get("/")
    async def root():
        return {"message": "Welcome to Party Invite API", "status": "running"}

    @app.get("/health", response_model=HealthResponse)
    async def health_check(request: Request):
        database_ok = request.app.state.database.check_connection()
        return {
            "status": "healthy" if database_ok else "degraded",
            "service": "party-invite-api",
            "version": VERSION,
            "database": database_ok,
        }

    return app


app = create_app()


if __name__ == "__main__":
    from .serve import main

    main()
