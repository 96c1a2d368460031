"""
HTTP middleware: legacy path redirects and request start/finish logging.
"""
from __future__ import annotations

import re
from typing import List, Optional, Pattern, Tuple

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response

log = structlog.get_logger()

# (pattern, replacement) pairs, tried in order against the request path.
LEGACY_REDIRECTS: List[Tuple[Pattern[str], str]] = [
    (re.compile(r"^/tasks/(.+)$"), r"/todos/\1"),
    (re.compile(r"^/tasks/?$"), "/todos"),
]


# PUBLIC_INTERFACE
def rewrite_legacy_path(path: str) -> Optional[str]:
    """Return the `/todos...` equivalent of a legacy `/tasks...` path, or None."""
    for pattern, replacement in LEGACY_REDIRECTS:
        if pattern.match(path):
            return pattern.sub(replacement, path)
    return None


class LegacyRedirectMiddleware(BaseHTTPMiddleware):
    """Answer legacy `/tasks` URLs with a 308 to the matching `/todos` URL."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        target = rewrite_legacy_path(request.url.path)
        if target is None:
            return await call_next(request)

        if request.url.query:
            target = f"{target}?{request.url.query}"
        # 308 keeps the method and body, unlike 301.
        return RedirectResponse(url=target, status_code=308)


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """Log a Started line before dispatch and a Finished line after, whatever the outcome."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        method = request.method
        path = request.url.path

        log.info("Started", method=method, path=path)

        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            log.info("Finished", method=method, path=path, status_code=status_code)
