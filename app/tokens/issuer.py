"""Credential issuing."""
from datetime import datetime, timedelta, timezone
from typing import Optional

from app.tokens.signing import SecretKey, encode_token, normalize_key
from app.tokens.errors import EncodingError
from app.tokens.types import USER_ID_CLAIM, UserId, is_user_id


class TokenIssuer:
    """Sign ``{"user_id": ...}`` claim sets with a fixed key.

    With no ``expires_delta`` the output is deterministic for a given user id.
    """

    def __init__(
        self,
        secret_key: SecretKey,
        algorithm: str = "HS256",
        expires_delta: Optional[timedelta] = None,
    ) -> None:
        self._key = normalize_key(secret_key)
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    def issue(self, user_id: UserId) -> str:
        if not is_user_id(user_id):
            raise EncodingError(f"Cannot encode user id {user_id!r}")

        claims = {USER_ID_CLAIM: user_id}
        if self.expires_delta is not None:
            now = datetime.now(timezone.utc)
            claims["iat"] = now
            claims["exp"] = now + self.expires_delta
        return encode_token(claims, self._key, self.algorithm)


def issue(user_id: UserId, secret_key: SecretKey) -> str:
    return TokenIssuer(secret_key).issue(user_id)
