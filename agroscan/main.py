# 📄 File: agroscan/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts AgroScan, connects all the parts together,
# and makes sure everything is ready to handle requests from farmers and admins.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point: lifespan (logging, database engine,
# session factory), middleware, CORS, repository bindings, router registration,
# exception rendering, rate limiting and static serving of uploaded images.
#
# 🔗 Dependencies:
# - FastAPI framework, slowapi, uvicorn
# - agroscan.shared.config.settings
# - agroscan.shared.infrastructure.database (connection and session)
# - Module repositories and routers
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - Development server commands (python -m agroscan.main)

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from agroscan.api.middleware.error_handling import ErrorHandlingMiddleware
from agroscan.api.middleware.logging import RequestLoggingMiddleware
from agroscan.api.v1 import API_TAGS
from agroscan.api.v1.router import api_v1_router
from agroscan.shared.config.settings import get_settings
from agroscan.shared.core.exceptions import AgroScanException
from agroscan.shared.core.rate_limiter import limiter
from agroscan.shared.infrastructure.database.connection import close_database, init_database
from agroscan.shared.infrastructure.database.session import session_manager
from agroscan.shared.utils.logging import log_shutdown_event, log_startup_event, setup_logging

# Bind each repository contract to its SQLAlchemy implementation
from agroscan.modules.user_management.domain.repositories.user_repository import UserRepository
from agroscan.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
from agroscan.modules.inspection_management.domain.repositories import (
    InspectionAnalysisRepository,
    InspectionImageRepository,
    InspectionRepository,
)
from agroscan.modules.inspection_management.infrastructure.database.inspection_analysis_repository_impl import (
    InspectionAnalysisRepositoryImpl,
)
from agroscan.modules.inspection_management.infrastructure.database.inspection_image_repository_impl import (
    InspectionImageRepositoryImpl,
)
from agroscan.modules.inspection_management.infrastructure.database.inspection_repository_impl import (
    InspectionRepositoryImpl,
)

# Get application settings
settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Opens the database engine and session factory on startup and
    disposes of the engine on shutdown.
    """
    setup_logging()
    log_startup_event(settings.APP_NAME, settings.APP_VERSION, {"environment": settings.ENVIRONMENT})

    await init_database(settings)
    logger.info("✅ Database connection initialized")

    session_manager.initialize()
    logger.info("✅ Session manager initialized")

    try:
        yield  # Application is running
    finally:
        log_shutdown_event(settings.APP_NAME)
        await close_database()
        logger.info("✅ Database connections closed")


def create_application() -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application with middleware,
    routers and exception handlers based on the current settings.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.ENABLE_SWAGGER_UI else None,
        redoc_url="/redoc" if settings.ENABLE_REDOC else None,
        openapi_tags=API_TAGS,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    # Added first so it sits inside the request logger
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Response-Time"],
    )

    # Rate limiting for the authentication endpoints
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Whenever a service asks for a repository contract, give it the SQLAlchemy implementation
    app.dependency_overrides[UserRepository] = UserRepositoryImpl
    app.dependency_overrides[InspectionRepository] = InspectionRepositoryImpl
    app.dependency_overrides[InspectionImageRepository] = InspectionImageRepositoryImpl
    app.dependency_overrides[InspectionAnalysisRepository] = InspectionAnalysisRepositoryImpl

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_v1_router, prefix="/api/v1")

    upload_root = Path(settings.UPLOAD_ROOT)
    upload_root.mkdir(parents=True, exist_ok=True)
    app.mount(
        settings.UPLOAD_URL_PREFIX,
        StaticFiles(directory=str(upload_root)),
        name="uploads",
    )

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    @app.exception_handler(AgroScanException)
    async def agroscan_exception_handler(
        request: Request,
        exc: AgroScanException
    ) -> JSONResponse:
        """Handle custom AgroScan application exceptions."""
        if exc.status_code >= 500:
            logger.error(f"{exc.error_code}: {exc.message}", extra={"details": exc.details})

        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": {
                    **exc.to_dict(),
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                    "request_id": getattr(request.state, "request_id", None),
                }
            },
        )

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if settings.ENABLE_SWAGGER_UI else None,
            "health_check": "/api/v1/health",
            "api_base": "/api/v1",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        """Favicon endpoint to prevent 404 errors."""
        return Response(status_code=204)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Main function for running the application in development.

    Used when running the application directly with python -m agroscan.main
    or through the agroscan console script.
    """
    uvicorn.run(
        "agroscan.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
