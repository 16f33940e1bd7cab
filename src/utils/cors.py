"""Cross-origin allow-list enforcement."""

import logging
from collections.abc import Iterable

from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


def is_allowed_origin(origin: str | None, allow_list: Iterable[str]) -> bool:
    """Check whether a request origin may call the API.

    Requests without an Origin header (curl, server-to-server) are allowed.
    """
    if not origin:
        return True
    return origin in allow_list


class OriginGuardMiddleware(BaseHTTPMiddleware):
    """Reject requests whose Origin header is not on the allow-list."""

    def __init__(self, app: ASGIApp, allowed_origins: Iterable[str]) -> None:
        super().__init__(app)
        self.allowed_origins = frozenset(allowed_origins)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        origin = request.headers.get("origin")
        if not is_allowed_origin(origin, self.allowed_origins):
            logger.warning(f"Blocked by CORS: {origin}")
            return PlainTextResponse("Not allowed by CORS", status_code=403)
        return await call_next(request)
