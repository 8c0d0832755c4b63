from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from sqlalchemy import text
import uvicorn
import logging
import sys
import os

from vitalcheck.core.config import settings
from vitalcheck.db.session import engine


def configure_logging() -> None:
    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.LOG_FILE:
        handlers.append(logging.FileHandler(settings.LOG_FILE))
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers
    )


configure_logging()

logger = logging.getLogger(__name__)


def check_database() -> None:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    logger.info(f"Starting up {settings.PROJECT_NAME}...")

    try:
        check_database()
        logger.info("Connected to the database successfully")
    except Exception as e:
        logger.error(f"Failed to connect to the database: {e}")
        raise SystemExit(1)

    if settings.uses_insecure_secret:
        logger.warning("SECRET_KEY is the development default; set SECRET_KEY before deploying")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.PROJECT_NAME}...")
    engine.dispose()
    logger.info("Database connections released")


def create_application() -> FastAPI:
    """Create and configure the FastAPI application"""

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Health assessment intake and admin dashboard API",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    logger.info(f"CORS configured for {settings.ENVIRONMENT.value} environment with origins: {settings.CORS_ORIGINS}")

    from vitalcheck.api.api import api_router
    app.include_router(api_router, prefix="/api")

    static_dir = settings.STATIC_DIR
    if os.path.isdir(static_dir):
        app.mount("/static", StaticFiles(directory=static_dir), name="static")
    else:
        logger.warning(f"Static directory not found: {static_dir}")

    return app


app = create_application()


@app.get("/", include_in_schema=False)
async def index():
    """Public assessment form"""
    return FileResponse(os.path.join(settings.STATIC_DIR, "index.html"))


@app.get("/admin", include_in_schema=False)
async def admin_panel():
    """Admin panel"""
    return FileResponse(os.path.join(settings.STATIC_DIR, "admin.html"))


@app.get("/health", tags=["Health Check"])
def health_check():
    """Health check endpoint"""
    try:
        check_database()
        db_status = "healthy"
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        db_status = "unhealthy"

    return {
        "status": "healthy",
        "version": settings.VERSION,
        "project": settings.PROJECT_NAME,
        "database": db_status,
    }


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as {"error": message}"""
    if exc.status_code >= 500:
        logger.error(f"HTTP {exc.status_code}: {exc.detail} - {request.url}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and query parameters are client errors"""
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid request",
            "details": [
                {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
                for err in exc.errors()
            ],
        },
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled exceptions"""
    logger.exception(f"Unhandled error: {exc} - {request.url}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"}
    )


def run() -> None:
    uvicorn.run(
        "vitalcheck.main:app",
        host=settings.SERVER_HOST,
        port=settings.PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    run()
