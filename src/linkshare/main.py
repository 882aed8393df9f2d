# src/linkshare/main.py
"""Main entry point for the Linkshare application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from linkshare.api.v1 import articles_router, groups_router, votes_router
from linkshare.api.v1.dependencies import ArticleServiceDep
from linkshare.core.errors import StoreUnavailableError
from linkshare.core.settings import settings

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Linkshare API",
    description="Vote-ranked article sharing",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Include API routers
app.include_router(articles_router, prefix="/api/v1")
app.include_router(votes_router, prefix="/api/v1")
app.include_router(groups_router, prefix="/api/v1")


@app.exception_handler(StoreUnavailableError)
async def store_unavailable_handler(request: Request, exc: StoreUnavailableError) -> JSONResponse:
    logger.error("Store unavailable while handling %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Article store unavailable"},
    )


@app.get("/health")
async def health_check(service: ArticleServiceDep) -> dict[str, str]:
    """Health check endpoint; answers 503 when the store does not respond."""
    service.store.ping()
    return {"status": "ok", "store": "ok"}


@app.get("/")
async def root() -> dict[str, object]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "ranking": settings.ranking_rules,
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("linkshare.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
