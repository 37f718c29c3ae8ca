"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.ec_common.errors import AppError
from src.ec_common.response import error_response
from src.ec_gateway.middleware.request_log import RequestLogMiddleware
from src.ec_surveillance.api.router import router as surveillance_router
from src.ec_surveillance.application.service import ExcessiveCancellationsChecker

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: load and group the trades file once. A load failure aborts startup."""
    app.state.checker = ExcessiveCancellationsChecker.from_csv(
        settings.TRADES_CSV_PATH,
        window=settings.window,
        max_ratio=settings.max_cancel_ratio,
    )
    yield
    app.state.checker = None


app = FastAPI(
    title=settings.APP_NAME,
    version=VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(exc.code, exc.message, request)
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


app.include_router(surveillance_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": VERSION}
