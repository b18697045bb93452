"""Email-to-Ticket Parser: FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from mailticket.config import settings
from mailticket.domain.policies.categories import category_names
from mailticket.infrastructure.api.rate_limit import limiter, rate_limit_exceeded_handler
from mailticket.infrastructure.api.routes_health import router as health_router
from mailticket.infrastructure.api.routes_tickets import router as tickets_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Email parser ready with %d categories", len(category_names()))
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Email-to-Ticket Parser",
        description="Extract structured support tickets from raw email text",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Rate limiting: slowapi reads the limiter from app.state
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(tickets_router, prefix="/api")

    return app


app = create_app()
