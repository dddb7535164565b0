import traceback
from typing import Callable
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging_config import get_logger
from app.utils.http_helpers import server_error

logger = get_logger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Last-resort boundary: anything escaping a route becomes a 500
    carrying the ServerError body. Details go to the log only.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)

        except Exception as exc:
            logger.error(
                "Unhandled exception occurred",
                exc_info=True,
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "error_type": type(exc).__name__,
                    "traceback": traceback.format_exc(),
                },
            )

            response = server_error()
            return JSONResponse(
                status_code=response.status,
                content=response.to_dict()["body"],
            )
