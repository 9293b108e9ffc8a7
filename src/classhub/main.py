# src/classhub/main.py
"""Main entry point for the ClassHub application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from classhub.api.v1 import (
    activities_router,
    classes_router,
    signups_router,
    users_router,
)
from classhub.core.logging import configure_logging
from classhub.core.settings import settings

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the FastAPI application with middleware and routers attached."""
    configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Class roster and activity signup backend",
        version=settings.app_version,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.include_router(users_router, prefix="/api/v1")
    app.include_router(classes_router, prefix="/api/v1")
    app.include_router(activities_router, prefix="/api/v1")
    app.include_router(signups_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint to verify the service is running."""
        return {"status": "ok"}

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint with basic information about the API."""
        return {
            "name": f"{settings.app_name} API",
            "version": settings.app_version,
            "docs": "/docs",
        }

    logger.info("%s %s ready", settings.app_name, settings.app_version)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("classhub.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
