"""FastAPI Application for the payment lifecycle service."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from payment_lifecycle.shared.core.logging import setup_logging
from payment_lifecycle.shared.core.settings import get_settings
from payment_lifecycle.shared.presentation.exception_handlers import (
    register_exception_handlers,
)
from payment_lifecycle.shared.infrastructure.database import init_db, close_db
from payment_lifecycle.features.payments.presentation.router import (
    router as payments_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info(
        "Payment lifecycle service starting",
        extra={
            "host": settings.host,
            "port": settings.port,
            "environment": settings.environment,
        },
    )

    await init_db()

    yield

    await close_db()
    logger.info("Payment lifecycle service shutting down")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Payment Lifecycle Service",
        description="Payment record population, client-scoped retrieval and duplicate detection",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(payments_router, prefix="/api/payments", tags=["Payments"])

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "service": "payment-lifecycle"}

    return app


app = create_app()
