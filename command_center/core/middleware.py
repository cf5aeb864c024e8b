"""
Response envelope middleware.

- Answers every OPTIONS request (CORS preflight) directly.
- Turns any uncaught handler exception into a 500 `{"error": <message>}`.
- Stamps the fixed CORS header set on every response, errors included.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from command_center.core.envelope import CORS_HEADERS, error_response

logger = logging.getLogger(__name__)


class EnvelopeMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=dict(CORS_HEADERS))

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = error_response(str(exc), 500)

        response.headers.update(CORS_HEADERS)
        return response
