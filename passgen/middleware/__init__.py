# PASSGEN Middleware
from passgen.middleware.security import SecurityMiddleware
from passgen.middleware.rate_limit import RateLimiter, rate_limiter

__all__ = ["SecurityMiddleware", "RateLimiter", "rate_limiter"]
