"""In-memory sliding-window rate limiting for the simulation routes."""

from __future__ import annotations

import time
from collections import defaultdict

from fastapi import HTTPException, Request, status

from app.config import settings


class RateLimiter:
    """Per-client-IP request budget over a sliding time window."""

    def __init__(self, max_requests: int = 10, window_seconds: int = 60):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._requests: dict[str, list[float]] = defaultdict(list)

    def _client_key(self, request: Request) -> str:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
        return request.client.host if request.client else "unknown"

    def _prune(self, key: str, now: float) -> None:
        cutoff = now - self.window_seconds
        self._requests[key] = [t for t in self._requests[key] if t > cutoff]

    def reset(self) -> None:
        self._requests.clear()

    def check(self, request: Request) -> None:
        """Raise 429 once the client has used up its budget."""
        now = time.time()
        key = self._client_key(request)
        self._prune(key, now)

        if len(self._requests[key]) >= self.max_requests:
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail=(
                    f"Rate limit exceeded. Max {self.max_requests} simulations "
                    f"per {self.window_seconds}s."
                ),
            )

        self._requests[key].append(now)


simulation_limiter = RateLimiter(
    max_requests=settings.simulation_rate_limit,
    window_seconds=settings.simulation_rate_window_seconds,
)
