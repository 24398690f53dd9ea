"""FastAPI application entry point for the Payment Gateway."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from payment_gateway.api.routes import router as payments_router
from payment_gateway.clients.factory import get_bank_client
from payment_gateway.config import settings
from payment_gateway.domain.clock import SystemClock
from payment_gateway.domain.currency import CurrencyService
from payment_gateway.domain.validation import PaymentValidator
from payment_gateway.logging_config import configure_logging
from payment_gateway.models import AcquiringBankError, InvalidPaymentId, UnsupportedCurrency
from payment_gateway.repositories import build_payment_repository

# Configure logging at module level
configure_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager.

    Handles startup and shutdown:
    - Build currency service, validator, repository and bank client
    - Close the bank client on shutdown
    """
    logger.info("starting_payment_gateway", environment=settings.environment)

    app.state.currency_service = CurrencyService(settings.supported_currencies)
    app.state.payment_validator = PaymentValidator(SystemClock())
    app.state.payment_repository = build_payment_repository(settings)
    app.state.bank_client = get_bank_client(settings.acquiring_bank)

    logger.info(
        "payment_gateway_started",
        repository_backend=settings.repository_backend,
        bank_client=settings.acquiring_bank.client,
    )

    yield

    logger.info("shutting_down_payment_gateway")
    await app.state.bank_client.close()
    logger.info("payment_gateway_shutdown_complete")


# Create FastAPI app
app = FastAPI(
    title="Payment Gateway",
    description="Card payment authorization gateway",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(payments_router)


@app.exception_handler(UnsupportedCurrency)
async def unsupported_currency_handler(request: Request, exc: UnsupportedCurrency) -> JSONResponse:
    logger.warning("unsupported_currency", currency=exc.currency, path=request.url.path)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(AcquiringBankError)
async def acquiring_bank_error_handler(request: Request, exc: AcquiringBankError) -> JSONResponse:
    logger.error(
        "acquiring_bank_failure",
        error=str(exc),
        bank_status_code=exc.status_code,
        path=request.url.path,
    )
    return JSONResponse(status_code=502, content={"detail": "Acquiring bank unavailable"})


@app.exception_handler(InvalidPaymentId)
async def invalid_payment_id_handler(request: Request, exc: InvalidPaymentId) -> JSONResponse:
    logger.warning("invalid_payment_id", payment_id=exc.payment_id)
    return JSONResponse(status_code=400, content={"detail": "Invalid payment id format"})


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "environment": settings.environment,
    }


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "service": "Payment Gateway",
        "version": "0.1.0",
        "status": "running",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "payment_gateway.api.main:app",
        host="0.0.0.0",
        port=5000,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )
