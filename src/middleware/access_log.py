"""Access logging middleware."""

import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware


logger = logging.getLogger(__name__)


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Logs status, method, uri and execution time of every request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Time the request and log it once a response is produced."""
        start_time = time.perf_counter()
        method = request.method
        uri = str(request.url.path)
        if request.url.query:
            uri = f"{uri}?{request.url.query}"

        try:
            response = await call_next(request)
        except Exception:
            # Unhandled errors are answered by the outermost error middleware
            _log_access(500, method, uri, start_time)
            raise

        _log_access(response.status_code, method, uri, start_time)
        return response


def _log_access(status: int, method: str, uri: str, start_time: float) -> None:
    exec_time = int((time.perf_counter() - start_time) * 1000)
    logger.info(
        "status=%s method=%s uri=%s exec_time=%sms",
        status,
        method,
        uri,
        exec_time,
        extra={
            "status": status,
            "method": method,
            "uri": uri,
            "exec_time": f"{exec_time}ms",
        },
    )
