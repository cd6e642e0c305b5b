"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from infrastructure.config import Settings, get_logger, get_settings, setup_logger
from infrastructure.database import init_db, close_db
from presentation.api.v1.endpoints import applications, health, notifications, roster


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    settings = get_settings()

    # Setup logging
    setup_logger(
        level=settings.log_level,
        log_format=settings.log_format,
        sql_echo=settings.database_echo,
    )

    # Initialize database
    get_logger(__name__).info(f"Starting {settings.app_name} ({settings.environment})")
    await init_db()

    yield

    # Shutdown
    await close_db()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application with all routers mounted."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(health.router, prefix=settings.api_v1_prefix)
    app.include_router(applications.router, prefix=settings.api_v1_prefix)
    app.include_router(roster.router, prefix=settings.api_v1_prefix)
    app.include_router(notifications.router, prefix=settings.api_v1_prefix)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
