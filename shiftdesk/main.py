import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from shiftdesk.api.middleware import LoggingMiddleware
from shiftdesk.api.routes import shifts
from shiftdesk.core.config import settings
from shiftdesk.core.exceptions import (
    ConflictError,
    DirectoryUnavailableError,
    NotFoundError,
    ScheduleError,
    StorageError,
    ValidationError,
)
from shiftdesk.core.logging import setup_logging
from shiftdesk.db.database import engine
from shiftdesk.db.init_db import init_db

logger = logging.getLogger(__name__)

CLIENT_ERROR_STATUS = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}

SERVER_ERROR_STATUS = {
    DirectoryUnavailableError: status.HTTP_502_BAD_GATEWAY,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    if settings.CREATE_TABLES:
        await init_db(engine)
    app.state.http_client = httpx.AsyncClient()
    logger.info(f"Shift API started ({settings.ENV})")
    try:
        yield
    finally:
        await app.state.http_client.aclose()
        await engine.dispose()


app = FastAPI(
    title="Shift Schedule API",
    version="0.1.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)
app.add_middleware(LoggingMiddleware)
app.include_router(shifts.router)


@app.exception_handler(ScheduleError)
async def schedule_error_handler(request: Request, exc: ScheduleError):
    for error_type, status_code in CLIENT_ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return JSONResponse(
                status_code=status_code,
                content={"detail": exc.message, "reason": exc.reason},
            )

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    for error_type, code in SERVER_ERROR_STATUS.items():
        if isinstance(exc, error_type):
            status_code = code
            break
    # internal message stays in the log
    logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
    return JSONResponse(
        status_code=status_code,
        content={"detail": "Internal server error" if status_code == 500 else "Upstream service unavailable"},
    )


@app.get("/health")
def health_check():
    return {"status": "ok"}
