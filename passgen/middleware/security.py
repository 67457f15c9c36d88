"""
Security middleware for request filtering
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from passgen.middleware.rate_limit import rate_limiter
from passgen.logging_config import log_rate_limited


class SecurityMiddleware(BaseHTTPMiddleware):
    """
    Middleware that runs before route handlers
    - Applies rate limiting to API routes
    - Adds security headers so credentials are never cached
    """

    RATE_LIMITED_PREFIX = "/api/"

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path.startswith(self.RATE_LIMITED_PREFIX):
            client_ip = self._get_client_ip(request)
            rate_limiter.maybe_cleanup()
            if not rate_limiter.is_allowed(client_ip):
                log_rate_limited(client_ip)
                return self._add_security_headers(JSONResponse(
                    status_code=429,
                    content={"error": "rate_limited", "message": "Too many requests"}
                ))

        response = await call_next(request)
        return self._add_security_headers(response)

    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP from request"""
        if request.client:
            return request.client.host
        return "unknown"

    def _add_security_headers(self, response: Response) -> Response:
        """Add security headers to response"""
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer"
        response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate"
        response.headers["Pragma"] = "no-cache"
        response.headers["Content-Security-Policy"] = "default-src 'none'"
        return response
