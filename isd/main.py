"""
FastAPI Application Entry Point
Application factory and route registration
"""

import logging
from datetime import timedelta
from typing import Optional

from databases import Database
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from isd.auth.tokens import TokenManager, utcnow
from isd.config import Settings, settings as default_settings
from isd.database import connect_db, create_database, disconnect_db
from isd.errors import register_exception_handlers
from isd.logging_config import configure_logging
from isd.routes import account, athlete, auth, club, coach, organizer
from isd.schemas import ErrorResponse
from isd.storage import Stores

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings = default_settings,
    database: Optional[Database] = None,
    clock=utcnow,
) -> FastAPI:
    """
    Build the application

    Args:
        settings: configuration, the module level settings by default
        database: database handle; built from settings.DATABASE_URL when omitted
        clock: returns the current UTC time, used for token expiry
    """
    configure_logging(settings)

    if database is None:
        database = create_database(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Sports club, organizer, athlete and coach registry",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        responses={
            400: {"model": ErrorResponse},
            401: {"model": ErrorResponse},
            500: {"model": ErrorResponse},
        },
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    stores = Stores(database)
    app.state.stores = stores
    app.state.token_manager = TokenManager(
        stores.accounts,
        stores.tokens,
        lifetime=timedelta(hours=settings.TOKEN_EXPIRATION_HOURS),
        clock=clock,
    )

    @app.on_event("startup")
    async def startup():
        await connect_db(database)
        logger.info("%s started in %s mode", settings.APP_NAME, settings.APP_ENV)

    @app.on_event("shutdown")
    async def shutdown():
        await disconnect_db(database)
        logger.info("%s stopped", settings.APP_NAME)

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION,
        }

    app.include_router(club.router, prefix="/v1/club", tags=["Club"])
    app.include_router(organizer.router, prefix="/v1/organizer", tags=["Organizer"])
    app.include_router(athlete.router, prefix="/v1/athlete", tags=["Athlete"])
    app.include_router(coach.router, prefix="/v1/coach", tags=["Coach"])
    app.include_router(account.router, prefix="/v1/account", tags=["Account"])
    app.include_router(auth.router, prefix="/v1", tags=["Authentication"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "isd.main:app",
        host=default_settings.SERVER_HOST,
        port=default_settings.SERVER_PORT,
    )
