"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from starlette.exceptions import HTTPException

from app.config import get_settings
from app.database import engine
from app.exceptions import ReportAPIError
from app.models import Base

logger = logging.getLogger(__name__)
settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.APP_DEBUG else logging.INFO,
    format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting Report API...")
    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            if settings.DATABASE_AUTO_CREATE:
                await conn.run_sync(Base.metadata.create_all)
        logger.info("Connected to database")
    except Exception as e:
        # Keep serving; /health/ready reports the outage
        logger.error("Error connecting to database: %s", e)

    yield

    # Shutdown
    await engine.dispose()
    logger.info("Database pool closed")


app = FastAPI(
    title="Report API",
    description="Academic report card management backend",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ReportAPIError)
async def report_api_error_handler(request: Request, exc: ReportAPIError):
    logger.warning("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        loc = ".".join(str(p) for p in first.get("loc", ()))
        message = f"{loc}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    return JSONResponse({"error": message}, status_code=400)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse({"error": "Internal server error"}, status_code=500)


# REST API router
from app.api.router import router as api_router  # noqa: E402

app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    return {"message": "Report API is active"}


@app.get("/health")
async def health():
    """Basic liveness probe."""
    return {"status": "OK", "timestamp": datetime.now(UTC).isoformat()}


@app.get("/health/ready")
async def health_ready():
    """Readiness probe with database check."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return {"status": "ready", "database": "ok"}
    except Exception as e:
        logger.error("Health ready check failed: %s", e)
        return JSONResponse(
            {"status": "not_ready", "database": "error"},
            status_code=503
        )


def run() -> None:
    import uvicorn

    uvicorn.run("app.main:app", host=settings.APP_HOST, port=settings.APP_PORT)
