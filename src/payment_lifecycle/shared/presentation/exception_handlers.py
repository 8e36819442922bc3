"""Exception handlers for the FastAPI application."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from payment_lifecycle.shared.domain.exceptions import (
    InvalidArgumentError,
    PayeeResolutionError,
    PaymentError,
    RecordNotFoundError,
)
from payment_lifecycle.shared.presentation.api_response import APIResponse

logger = logging.getLogger(__name__)


def _error_content(message: str, exc: PaymentError) -> dict:
    return APIResponse.error(message, errors=[exc.error_code.value]).model_dump()


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers."""

    @app.exception_handler(RecordNotFoundError)
    async def record_not_found_handler(
        request: Request, exc: RecordNotFoundError
    ) -> JSONResponse:
        # Payments and transactions share one response so other clients'
        # records cannot be told apart from missing ones.
        return JSONResponse(
            status_code=404,
            content=_error_content("Payment not found", exc),
        )

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(
        request: Request, exc: InvalidArgumentError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=_error_content(str(exc), exc),
        )

    @app.exception_handler(PayeeResolutionError)
    async def payee_resolution_handler(
        request: Request, exc: PayeeResolutionError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=502,
            content=_error_content(str(exc), exc),
        )

    @app.exception_handler(PaymentError)
    async def payment_error_handler(
        request: Request, exc: PaymentError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=_error_content(str(exc), exc),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return JSONResponse(
            status_code=500,
            content=APIResponse.error(
                "Internal server error", errors=["INTERNAL_ERROR"]
            ).model_dump(),
        )
