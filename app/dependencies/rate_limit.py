"""Per-IP per-path sliding-window rate limiter for the login endpoint."""
import logging
import time
from collections import defaultdict, deque
from fastapi import HTTPException, Request, status
from app.core.config import settings

logger = logging.getLogger(__name__)

# key -> deque[timestamps], process-local
_buckets = defaultdict(deque)


def reset_rate_limits() -> None:
    _buckets.clear()


def _drop_idle_buckets(window_start: float) -> None:
    # a bucket whose newest hit is outside the window is empty after pruning
    idle = [key for key, bucket in _buckets.items() if not bucket or bucket[-1] <= window_start]
    for key in idle:
        del _buckets[key]


async def rate_limit(request: Request):
    if not settings.RATE_LIMIT_ENABLED:
        return True

    now = time.monotonic()
    window = settings.RATE_LIMIT_PERIOD_SECONDS
    limit = settings.RATE_LIMIT_REQUESTS

    # connection address, not X-Forwarded-For, which the caller controls
    client = getattr(request, "client", None)
    client_ip = client.host if client and getattr(client, "host", None) else "unknown"
    key = f"{client_ip}:{request.url.path}"
    window_start = now - window
    _drop_idle_buckets(window_start)
    bucket = _buckets[key]

    while bucket and bucket[0] <= window_start:
        bucket.popleft()

    if len(bucket) >= limit:
        logger.warning("Rate limit exceeded for %s", key)
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Too many requests. Please slow down.",
        )

    bucket.append(now)
    return True
