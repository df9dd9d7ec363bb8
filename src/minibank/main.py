"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from minibank.config.settings import get_settings
from minibank.config.logging_config import setup_logging
from minibank.repositories.sqlalchemy import TransactionManager, create_db_engine, init_db
from minibank.api.routers import accounts_router
from minibank.core.exceptions import (
    AppError,
    AccountAlreadyExistsError,
    AccountNotFoundError,
    BalanceNotEnoughError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = {
    AccountNotFoundError: 404,
    AccountAlreadyExistsError: 409,
    BalanceNotEnoughError: 400,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    engine = create_db_engine(get_settings())
    init_db(engine)
    app.state.transaction_manager = TransactionManager(engine)
    yield
    # Shutdown
    app.state.transaction_manager.dispose()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Minimal banking ledger",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(accounts_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    status_code = _STATUS_BY_ERROR.get(type(exc), 500)
    if status_code == 500:
        logger.error("Unhandled %s: %s", exc.code, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
