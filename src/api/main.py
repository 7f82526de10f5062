from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from sqlalchemy import text
import logging
import time

from src.api.core.database import engine
from src.api.core.exceptions import AppError
from src.api.config import settings

# Configure logging
logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    logger.info("Starting AgriPartner API...")

    # Test database connection; tables are created by init_database.py
    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            logger.info("✅ Database connected")
    except Exception as e:
        logger.error(f"❌ Database connection failed: {e}")
        # Don't raise - allow API to start even if DB is temporarily unavailable

    yield

    logger.info("Shutting down AgriPartner API...")
    await engine.dispose()


# Initialize FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Partnership management API for agricultural investment: plots, activities, finances, insurance, risk, events and chat",
    version=APP_VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan
)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# GZip compression for responses
app.add_middleware(GZipMiddleware, minimum_size=1000)


# Request timing middleware
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    logger.info(f"{request.method} {request.url.path} - {process_time:.3f}s")
    return response


# Domain errors (not found, invalid role, conflict)
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    logger.warning(f"{request.method} {request.url.path} - {exc.error_type}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.error_type,
            "detail": exc.message
        }
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc) if settings.DEBUG else "An error occurred"
        }
    )


# Health check endpoint
@app.get("/health", tags=["System"])
async def health_check():
    """Health check endpoint for monitoring"""
    db_status = "connected"

    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception:
        db_status = "disconnected"

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "version": APP_VERSION,
        "database": db_status
    }


# API version prefix
API_V1_PREFIX = settings.API_V1_STR

# Import routers
from src.api.routers import (  # noqa: E402
    auth,
    partnerships,
    farm_plots,
    activities,
    finance,
    insurance,
    risk_alerts,
    events,
    notifications,
    chat
)

# Include routers
app.include_router(
    auth.router,
    prefix=f"{API_V1_PREFIX}/auth",
    tags=["Authentication"]
)
app.include_router(
    partnerships.router,
    prefix=f"{API_V1_PREFIX}/partnerships",
    tags=["Partnerships"]
)
app.include_router(
    farm_plots.router,
    prefix=f"{API_V1_PREFIX}/farm-plots",
    tags=["Farm Plots"]
)
app.include_router(
    activities.router,
    prefix=f"{API_V1_PREFIX}/activities",
    tags=["Farm Activities"]
)
app.include_router(
    finance.router,
    prefix=f"{API_V1_PREFIX}/finance",
    tags=["Finance"]
)
app.include_router(
    insurance.router,
    prefix=f"{API_V1_PREFIX}/insurance",
    tags=["Insurance"]
)
app.include_router(
    risk_alerts.router,
    prefix=f"{API_V1_PREFIX}/risk-alerts",
    tags=["Risk Alerts"]
)
app.include_router(
    events.router,
    prefix=f"{API_V1_PREFIX}/events",
    tags=["Community Events"]
)
app.include_router(
    notifications.router,
    prefix=f"{API_V1_PREFIX}/notifications",
    tags=["Notifications"]
)
app.include_router(
    chat.router,
    prefix=f"{API_V1_PREFIX}/chat",
    tags=["Chat"]
)


# Root endpoint
@app.get("/", tags=["Root"])
async def root():
    """API root endpoint"""
    return {
        "message": "Welcome to AgriPartner API",
        "docs": "/api/docs",
        "version": APP_VERSION,
        "endpoints": {
            "health": "/health",
            "docs": "/api/docs",
            "auth": f"{API_V1_PREFIX}/auth",
            "partnerships": f"{API_V1_PREFIX}/partnerships",
            "farm_plots": f"{API_V1_PREFIX}/farm-plots",
            "activities": f"{API_V1_PREFIX}/activities",
            "finance": f"{API_V1_PREFIX}/finance",
            "insurance": f"{API_V1_PREFIX}/insurance",
            "risk_alerts": f"{API_V1_PREFIX}/risk-alerts",
            "events": f"{API_V1_PREFIX}/events",
            "notifications": f"{API_V1_PREFIX}/notifications",
            "chat": f"{API_V1_PREFIX}/chat"
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "src.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="info"
    )
