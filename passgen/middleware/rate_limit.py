"""
In-memory per-client rate limiting for generation endpoints
"""

import time
from typing import Dict, Tuple
from dataclasses import dataclass
from threading import Lock

from passgen.config import settings


@dataclass
class RateLimitConfig:
    """Rate limit configuration"""
    requests_per_minute: int = 60
    burst_size: int = 10
    cleanup_interval: int = 1000     # Requests between idle-bucket sweeps
    max_idle_seconds: int = 3600


class RateLimiter:
    """
    Token bucket rate limiter
    Per-IP tracking with periodic cleanup of idle clients
    """

    def __init__(self, config: RateLimitConfig = None):
        self.config = config or RateLimitConfig()
        self._buckets: Dict[str, Tuple[float, float]] = {}
        self._requests_since_cleanup = 0
        self._lock = Lock()

    def is_allowed(self, ip: str) -> bool:
        """
        Consume one token for ip
        Returns False when the bucket is empty
        """
        with self._lock:
            now = time.monotonic()
            last_update, tokens = self._buckets.get(ip, (now, float(self.config.burst_size)))

            # Replenish tokens based on time passed
            tokens_per_second = self.config.requests_per_minute / 60.0
            tokens = min(
                float(self.config.burst_size),
                tokens + (now - last_update) * tokens_per_second
            )

            if tokens >= 1:
                self._buckets[ip] = (now, tokens - 1)
                return True

            self._buckets[ip] = (now, tokens)
            return False

    def cleanup_old_entries(self, max_age_seconds: int = 3600):
        """Forget clients idle for longer than max_age_seconds"""
        with self._lock:
            now = time.monotonic()
            stale = [
                ip for ip, (last_update, _) in self._buckets.items()
                if now - last_update > max_age_seconds
            ]
            for ip in stale:
                del self._buckets[ip]

    def maybe_cleanup(self) -> bool:
        """
        Count one request and sweep idle buckets every cleanup_interval requests
        Returns True when a sweep ran
        """
        with self._lock:
            self._requests_since_cleanup += 1
            if self._requests_since_cleanup < self.config.cleanup_interval:
                return False
            self._requests_since_cleanup = 0
        self.cleanup_old_entries(self.config.max_idle_seconds)
        return True

    def reset(self):
        with self._lock:
            self._buckets.clear()
            self._requests_since_cleanup = 0

    def get_stats(self) -> dict:
        """Get rate limiter statistics"""
        with self._lock:
            return {
                "tracked_ips": len(self._buckets),
                "config": {
                    "requests_per_minute": self.config.requests_per_minute,
                    "burst_size": self.config.burst_size
                }
            }


# Global rate limiter instance
rate_limiter = RateLimiter(RateLimitConfig(
    requests_per_minute=settings.RATE_LIMIT_PER_MINUTE,
    burst_size=settings.RATE_LIMIT_BURST,
))
