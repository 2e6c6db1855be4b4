"""Build the token issuer/verifier pair from settings.

The secret key is read here, once, and handed to both objects. Nothing else
in the app reads SECRET_KEY.
"""
from datetime import timedelta

from app.core.config import Settings
from app.tokens import TokenIssuer, TokenVerifier


def build_token_pair(settings: Settings) -> tuple[TokenIssuer, TokenVerifier]:
    """Raises `SigningKeyError` when SECRET_KEY is missing or empty."""
    expires_delta = None
    if settings.TOKEN_EXPIRE_MINUTES > 0:
        expires_delta = timedelta(minutes=settings.TOKEN_EXPIRE_MINUTES)

    issuer = TokenIssuer(
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        expires_delta=expires_delta,
    )
    verifier = TokenVerifier(settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return issuer, verifier
