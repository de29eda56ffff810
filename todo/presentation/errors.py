import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from todo.domain.errors import DomainError

logger = logging.getLogger(__name__)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.info(
        "domain error on %s %s: %s",
        request.method,
        request.url.path,
        exc.message,
        extra={"error_code": exc.code},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_payload())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
