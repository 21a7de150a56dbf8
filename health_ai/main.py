from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.gzip import GZipMiddleware
from contextlib import asynccontextmanager
from dotenv import load_dotenv
from datetime import datetime, timezone
import logging

# Load environment variables as early as possible
load_dotenv()

from .config import settings
from .database import create_db_and_tables
from .middleware import SecurityMiddleware, LoggingMiddleware, ErrorHandlingMiddleware, RequestSizeLimitMiddleware
from .exceptions import http_exception_handler, validation_exception_handler
from .routers import (
    auth_router,
    health_profile_router,
    medical_tests_router,
    consultation_router,
    preventive_plan_router,
    history_router,
    files_router,
)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format=settings.LOG_FORMAT
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Health AI API...")
    app.state.db_init_ok = True
    app.state.db_init_error = None
    try:
        create_db_and_tables()
        logger.info("Database initialized successfully")
    except Exception as e:
        # Keep serving; /health reports the failure
        app.state.db_init_ok = False
        app.state.db_init_error = str(e)
        logger.exception("Database initialization failed")
    yield
    logger.info("Shutting down Health AI API...")

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
    docs_url=("/docs" if settings.DOCS_ENABLED else None),
    redoc_url=("/redoc" if settings.DOCS_ENABLED else None),
    openapi_url=("/openapi.json" if settings.DOCS_ENABLED else None)
)

app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

app.add_middleware(ErrorHandlingMiddleware)
app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityMiddleware)
app.add_middleware(RequestSizeLimitMiddleware)

app.add_middleware(GZipMiddleware, minimum_size=settings.GZIP_MIN_SIZE)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.allowed_methods_list,
    allow_headers=settings.allowed_headers_list,
)

app.include_router(auth_router.router)
app.include_router(health_profile_router.router)
app.include_router(medical_tests_router.router)
app.include_router(consultation_router.router)
app.include_router(preventive_plan_router.router)
app.include_router(history_router.router)
app.include_router(files_router.router)

@app.get("/health")
def health_check():
    return {
        "status": "healthy" if getattr(app.state, "db_init_ok", True) else "degraded",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": {
            "ok": getattr(app.state, "db_init_ok", True),
            "error": getattr(app.state, "db_init_error", None)
        },
        "ai_provider": settings.AI_PROVIDER,
        "storage_backend": settings.STORAGE_BACKEND,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "health_ai.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )
