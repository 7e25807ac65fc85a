"""Translation of domain errors into JSON responses"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.exceptions import DomainError, ConfigurationFault


logger = logging.getLogger(__name__)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    if isinstance(exc, ConfigurationFault):
        logger.error("Configuration fault on %s %s: %s", request.method, request.url.path, exc.message)
        message = "Internal server error"
    else:
        logger.info("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
        message = exc.message

    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    content = {"detail": message, "error": type(exc).__name__}
    content.update(exc.extra())
    return JSONResponse(status_code=exc.status_code, content=content, headers=headers)


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
