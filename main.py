"""
Signup API entrypoint
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import settings
from app.core.container import container
from app.core.logging_config import get_logger, setup_logging
from app.middleware.error_middleware import ErrorHandlingMiddleware
from app.middleware.logging_middleware import LoggingMiddleware
from app.routes import api_v1_router

setup_logging(
    level=settings.LOG_LEVEL,
    json_format=settings.LOG_JSON,
    service=settings.APP_NAME,
)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager
    Handles startup and shutdown events
    """
    logger.info(
        "Application starting",
        extra={
            "version": settings.APP_VERSION,
            "password_hash_scheme": settings.PASSWORD_HASH_SCHEME,
        },
    )

    yield

    logger.info("Application shutting down...")


app = FastAPI(
    title=settings.APP_NAME,
    description="User signup with pluggable validation and password hashing",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

container.wire(modules=["app.routes.signup_route"])
app.container = container

app.add_middleware(ErrorHandlingMiddleware)
app.add_middleware(LoggingMiddleware)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "version": settings.APP_VERSION}


app.include_router(api_v1_router)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8001, reload=True, log_level="info")
