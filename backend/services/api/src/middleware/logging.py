"""
Per-request access logging with a correlation id.
"""
import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from backend.shared.config.logging_config import get_logger

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs one line when a request arrives and one when it is answered.

    The correlation id is taken from an incoming X-Request-ID header when the
    caller sends one, generated otherwise, exposed as ``request.state.request_id``
    and echoed on the response.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        log = get_logger("api.access", extra={
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
        })
        started = time.perf_counter()

        def elapsed_ms() -> float:
            return round((time.perf_counter() - started) * 1000, 2)

        log.info(
            f"--> {request.method} {request.url.path}",
            extra={
                "query": str(request.query_params),
                "client": request.client.host if request.client else None,
            }
        )

        try:
            response = await call_next(request)
        except Exception:
            log.error(f"<-- {request.method} {request.url.path} raised", extra={"elapsed_ms": elapsed_ms()}, exc_info=True)
            raise

        response.headers[REQUEST_ID_HEADER] = request_id
        log.info(
            f"<-- {request.method} {request.url.path} {response.status_code}",
            extra={"status_code": response.status_code, "elapsed_ms": elapsed_ms()}
        )
        return response


def setup_request_logging(app: FastAPI) -> None:
    """Install the access log middleware."""
    app.add_middleware(RequestLoggingMiddleware)
