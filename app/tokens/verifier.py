"""Credential verification.

Checks run in a fixed order so the error says which stage failed:

1. structure   -> ``MalformedCredential``
2. signature   -> ``SignatureInvalid`` (also a disallowed ``alg``)
3. time claims -> ``CredentialExpired`` / ``ClaimInvalid``
4. ``user_id`` -> ``ClaimMissing``

Unknown claims are ignored.
"""
from typing import Any

from jose.exceptions import ExpiredSignatureError, JWTClaimsError, JWTError

from app.tokens.signing import SecretKey, decode_token, load_unverified, normalize_key
from app.tokens.errors import (
    ClaimInvalid,
    ClaimMissing,
    CredentialExpired,
    MalformedCredential,
    SignatureInvalid,
)
from app.tokens.types import USER_ID_CLAIM, UserId, is_user_id


class TokenVerifier:
    def __init__(self, secret_key: SecretKey, algorithm: str = "HS256") -> None:
        self._key = normalize_key(secret_key)
        self.algorithm = algorithm

    def verify(self, credential: Any) -> UserId:
        """Return the ``user_id`` carried by ``credential``.

        Raises a ``CredentialRejected`` subclass on any failure.
        """
        if not isinstance(credential, str) or not credential.strip():
            raise MalformedCredential("No credential supplied")

        token = credential.strip()
        try:
            load_unverified(token)
        except JWTError as e:
            raise MalformedCredential(str(e)) from e

        try:
            claims = decode_token(token, self._key, self.algorithm)
        except ExpiredSignatureError as e:
            raise CredentialExpired(str(e)) from e
        except JWTClaimsError as e:
            raise ClaimInvalid(str(e)) from e
        except JWTError as e:
            raise SignatureInvalid(str(e)) from e

        user_id = claims.get(USER_ID_CLAIM)
        if not is_user_id(user_id):
            raise ClaimMissing(f"Claim '{USER_ID_CLAIM}' missing or unusable")
        return user_id


def verify(credential: Any, secret_key: SecretKey) -> UserId:
    return TokenVerifier(secret_key).verify(credential)
