# app/main.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from app.shared.config import settings, AppEnv
from app.shared.container import container
from app.adapters.api.routers import health, inflection
from utils.logging_setup import init_logging

init_logging(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    fmt=settings.LOG_FORMAT.value,
)
logger = structlog.get_logger()


def create_app() -> FastAPI:
    """Factory function to create the FastAPI application."""
    app = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        description="Morphological rule engine for constructed languages",
        docs_url="/docs" if settings.APP_ENV != AppEnv.PRODUCTION else None,
        redoc_url="/redoc" if settings.APP_ENV != AppEnv.PRODUCTION else None,
    )

    # 1. Dependency Injection
    container.wire(modules=["app.adapters.api.dependencies"])
    app.container = container

    # 2. CORS Configuration
    origins = ["*"] if settings.DEBUG else []
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 3. Global Exception Handlers
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"status": "error", "code": exc.status_code, "message": exc.detail},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "code": 500,
                "message": str(exc) if settings.DEBUG else "Internal Server Error",
            },
        )

    # 4. Mount Routes
    app.include_router(health.router, prefix="/api/v1")
    app.include_router(inflection.router, prefix="/api/v1")

    logger.info("app_created", app=settings.APP_NAME, env=settings.APP_ENV.value)
    return app


# Entry point for Uvicorn
app = create_app()
