"""
HTTP middleware: security headers and per-request logging.
"""
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


def build_content_security_policy(allowed_origins: list[str]) -> str:
    """CSP directives; ``connect-src`` also admits the CORS origins."""
    any_src = "https: http:"
    directives = {
        "default-src": f"'self' 'unsafe-inline' data: {any_src}",
        "script-src": f"'self' 'unsafe-inline' data: {any_src}",
        "style-src": f"'self' 'unsafe-inline' data: {any_src}",
        "img-src": f"'self' data: {any_src} blob:",
        "connect-src": " ".join(["'self'", *allowed_origins, any_src, "ws: wss:"]),
        "font-src": f"'self' {any_src} data:",
        "object-src": "'none'",
        "media-src": f"'self' data: {any_src}",
        "frame-src": f"'self' data: {any_src}",
        "worker-src": "'self' blob:",
        "child-src": "'self' blob:",
    }
    return "; ".join(f"{name} {value}" for name, value in directives.items())


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Set browser security headers on every response."""

    def __init__(self, app, allowed_origins: list[str]):
        super().__init__(app)
        self.headers = {
            "Content-Security-Policy": build_content_security_policy(allowed_origins),
            "Cross-Origin-Resource-Policy": "cross-origin",
            "Cross-Origin-Opener-Policy": "unsafe-none",
            "Origin-Agent-Cluster": "?1",
            "Referrer-Policy": "no-referrer",
            "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
            "X-Content-Type-Options": "nosniff",
            "X-DNS-Prefetch-Control": "off",
            "X-Download-Options": "noopen",
            "X-Frame-Options": "SAMEORIGIN",
            "X-Permitted-Cross-Domain-Policies": "none",
            "X-XSS-Protection": "0",
        }

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for name, value in self.headers.items():
            response.headers.setdefault(name, value)
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request: method, path, status and duration."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        elapsed_ms = (time.monotonic() - start) * 1000

        logger.info(
            "%s %s %d %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response
