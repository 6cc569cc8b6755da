import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import (
    AuthNotSupportedError,
    BatchOperationError,
    ClientNotInitializedError,
    MissingFieldsError,
    RateLimitError,
    RecordNotFoundError,
    RemoteOperationError,
    TableClientError,
)

logger = logging.getLogger(__name__)


async def client_not_initialized_handler(
    _request: Request, exc: ClientNotInitializedError
) -> JSONResponse:
    logger.error("Table client unavailable: %s", exc.message)
    return JSONResponse(status_code=503, content={"detail": exc.message})


async def table_client_error_handler(_request: Request, exc: TableClientError) -> JSONResponse:
    logger.error("Table client error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Backend error: {exc.message}"},
    )


async def remote_operation_error_handler(
    _request: Request, exc: RemoteOperationError
) -> JSONResponse:
    logger.error("Remote operation failed: %s", exc.message)
    return JSONResponse(status_code=502, content={"detail": exc.message})


async def not_found_handler(_request: Request, exc: RecordNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": exc.message})


async def missing_fields_handler(_request: Request, exc: MissingFieldsError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": exc.message, "fields": exc.fields},
    )


async def batch_operation_error_handler(
    _request: Request, exc: BatchOperationError
) -> JSONResponse:
    logger.warning("Batch operation failed: %s (%d errors)", exc.message, len(exc.failures))
    return JSONResponse(
        status_code=422,
        content={"detail": exc.message, "errors": exc.failures},
    )


async def auth_not_supported_handler(
    _request: Request, exc: AuthNotSupportedError
) -> JSONResponse:
    return JSONResponse(status_code=501, content={"detail": exc.message})


async def rate_limit_error_handler(_request: Request, exc: RateLimitError) -> JSONResponse:
    logger.warning("Rate limit hit for %s", exc.service)
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded for {exc.service}"},
    )
