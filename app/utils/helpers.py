"""Request helpers."""
from typing import Optional

from fastapi import Request


def get_client_ip(request: Request) -> str:
    """Return client's IP address from request headers or connection info.

    Checks `X-Forwarded-For` first (comma-separated), then falls back to
    `request.client.host`. Returns 'unknown' if not found.
    """
    x_forwarded_for = request.headers.get("x-forwarded-for")
    if x_forwarded_for:
        return x_forwarded_for.split(",")[0].strip()

    client = getattr(request, "client", None)
    if client and getattr(client, "host", None):
        return client.host

    return "unknown"


def extract_credential(request: Request, fallback_header: str) -> Optional[str]:
    """Pull the raw credential out of the request headers.

    `Authorization: Bearer <token>` wins; otherwise the value of
    `fallback_header` is used as-is. Returns None when neither is present.
    """
    auth_header = request.headers.get("authorization")
    if auth_header:
        scheme, _, token = auth_header.partition(" ")
        if scheme.lower() == "bearer":
            return token.strip()
        # a non-bearer Authorization header is not a credential we understand
        return ""

    return request.headers.get(fallback_header)
