"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging

from fastapi import FastAPI

from recovery_engine.core.config import settings
from recovery_engine.api.v1.router import api_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Muscle fatigue, daily condition and workout recommendation analytics.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "Recovery Engine API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "recovery-engine",
        "version": settings.VERSION
    }


@app.get("/info")
async def info():
    """Project metadata."""
    return {
        "project_name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "authors": settings.AUTHORS,
        "project_url": settings.PROJECT_URL
    }
