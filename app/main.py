"""
FastAPI application entry point for the Daily Plan Relay API.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import setup_error_handlers
from app.api.routers import api_router
from app.api.schemas import HealthResponse
from app.application.ports import LLMServicePort, SpreadsheetPort
from app.infra.config.dependencies import init_clients
from app.infra.config.logging_config import get_logger, setup_logging
from app.infra.config.settings import Settings, get_settings
from app.infra.middleware.request_context import RequestContextMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    settings: Settings = app.state.settings
    setup_logging(settings)
    logger = get_logger("app")

    try:
        init_clients(app, settings)
    except Exception as e:
        logger.critical("app.startup.failed", error=str(e))
        raise

    logger.info(
        "app.startup",
        app_name=settings.app_name,
        environment=settings.environment,
        port=settings.port,
    )

    yield

    # Shutdown
    logger.info("app.shutdown", app_name=settings.app_name)


def create_app(
    settings: Optional[Settings] = None,
    llm_client: Optional[LLMServicePort] = None,
    sheets_client: Optional[SpreadsheetPort] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Clients passed in are used as-is; missing ones are built at startup.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Turns a task list into a daily plan and a status email",
        version=settings.version,
        debug=settings.debug,
        docs_url="/docs" if not settings.is_production() else None,
        redoc_url="/redoc" if not settings.is_production() else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.llm_client = llm_client
    app.state.sheets_client = sheets_client

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request context + logging middleware
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    # Include routers
    app.include_router(api_router)

    @app.get("/")
    async def root():
        return {
            "message": f"{settings.app_name} is running",
            "version": settings.version,
            "status": "healthy",
        }

    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy", service=settings.app_name, version=settings.version
        )

    return app


# Create FastAPI application
app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info" if not settings.debug else "debug",
    )


if __name__ == "__main__":
    run()
