"""Request logging middleware for the surveillance API.

Assigns each request an id (request.state.request_id, echoed in the
X-Request-ID header and the ApiResponse envelope) and writes one line per
request. Error responses (AppError 4xx/5xx) are logged at WARNING so that
unknown-company lookups and load failures stand out from normal queries.

Log format:
    INFO  GET /api/v1/surveillance/companies/Bank%20of%20Mars 200 3ms req_a1b2c3d4e5f6
    WARNING GET /api/v1/surveillance/companies/Nobody 404 1ms req_0f1e2d3c4b5a
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.ec_common.response import new_request_id

logger = logging.getLogger("ec.request")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = new_request_id()
        request.state.request_id = request_id

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers[REQUEST_ID_HEADER] = request_id

        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(
            level,
            "%s %s %d %.0fms %s",
            request.method,
            path,
            response.status_code,
            elapsed_ms,
            request_id,
        )
        return response
