"""
Exception handlers that turn planscore errors into JSON responses.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from planscore.core.exceptions import PlanScoreError
from planscore.schemas.schemas import ErrorResponse

logger = logging.getLogger(__name__)


async def handle_planscore_error(request: Request, exc: PlanScoreError):
    """Contract errors are the caller's fault (4xx); anything else is ours."""
    if exc.http_status >= 500:
        logger.error(
            "%s on %s: %s", exc.code, request.url.path, exc.message, exc_info=exc
        )
    else:
        logger.warning("%s on %s: %s", exc.code, request.url.path, exc.message)

    body = ErrorResponse(detail=exc.message, code=exc.code)
    return JSONResponse(status_code=exc.http_status, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PlanScoreError, handle_planscore_error)
