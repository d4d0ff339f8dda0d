"""
Prometheus instrumentation for the marketplace API.

Every routed request is counted and timed under its route template
(``/api/vehicles/{vehicle_id}``), never under the concrete path.
"""
import time
from typing import Callable

from fastapi import FastAPI, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware

METRICS_PATH = "/metrics"
UNMATCHED_ROUTE = "unmatched"

HTTP_REQUESTS = Counter(
    "marketplace_api_request_count",
    "Requests answered, by route template and status",
    ["method", "endpoint", "status"]
)

HTTP_LATENCY = Histogram(
    "marketplace_api_request_latency_seconds",
    "Time spent answering a request",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5)
)

HTTP_IN_FLIGHT = Gauge(
    "marketplace_api_requests_in_progress",
    "Requests currently being handled"
)


def _endpoint_label(request: Request) -> str:
    """
    Full route template of the matched route, e.g. ``/api/vehicles/{vehicle_id}``.

    Depending on the FastAPI release, the matched route's ``path`` is either the
    full template or the template relative to its router prefix. The prefix is
    recovered from the leading segments of the concrete path, which the
    template's own segments do not cover.
    """
    route = request.scope.get("route")
    template = getattr(route, "path", None)
    if template is None:
        return UNMATCHED_ROUTE

    segments = [segment for segment in request.url.path.split("/") if segment]
    template_depth = len([segment for segment in template.split("/") if segment])
    prefix = segments[:max(len(segments) - template_depth, 0)]
    if not prefix:
        return template
    return "/" + "/".join(prefix) + template


class MetricsMiddleware(BaseHTTPMiddleware):
    """Records count, latency and concurrency for each request except scrapes."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path == METRICS_PATH:
            return await call_next(request)

        started = time.perf_counter()
        status = 500
        with HTTP_IN_FLIGHT.track_inprogress():
            try:
                response = await call_next(request)
                status = response.status_code
            finally:
                # The route is only known once routing has run
                endpoint = _endpoint_label(request)
                HTTP_REQUESTS.labels(method=request.method, endpoint=endpoint, status=status).inc()
                HTTP_LATENCY.labels(method=request.method, endpoint=endpoint).observe(
                    time.perf_counter() - started
                )
        return response


async def metrics_endpoint(request: Request) -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


def setup_metrics(app: FastAPI) -> None:
    """Install the middleware and expose the scrape endpoint at ``/metrics``."""
    app.add_middleware(MetricsMiddleware)
    app.add_route(METRICS_PATH, metrics_endpoint, include_in_schema=False)
