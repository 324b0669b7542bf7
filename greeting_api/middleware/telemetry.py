"""Request timing middleware."""

from __future__ import annotations

import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from greeting_api.telemetry import observe_request

UNMATCHED_ROUTE = "unmatched"


class TelemetryMiddleware(BaseHTTPMiddleware):
    """Time each request under its route template, e.g. ``/api/greetings/{greeting_id}``."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start_time = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            # The router stores the matched route in the shared scope.
            route = getattr(request.scope.get("route"), "path", UNMATCHED_ROUTE)
            observe_request(
                request.method,
                route,
                status_code,
                time.perf_counter() - start_time,
            )
