"""JWT signing primitive shared by the issuer and the verifier.

The helpers here know how to sign a claim set, how to load a compact token
without trusting it, and how to check its signature. Deciding what a failure
means is left to the callers.
"""
from typing import Any, Dict, Tuple, Union

from jose import jwt
from jose.exceptions import JOSEError

from app.tokens.errors import SigningKeyError

SecretKey = Union[str, bytes]

# Registered claims we never issue. Their presence must not reject a token.
_DECODE_OPTIONS = {
    "verify_aud": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
    "verify_at_hash": False,
}


def normalize_key(secret_key: SecretKey) -> bytes:
    """Return the key as bytes, rejecting empty or non-text keys."""
    if isinstance(secret_key, str):
        secret_key = secret_key.encode("utf-8")
    if not isinstance(secret_key, (bytes, bytearray)):
        raise SigningKeyError("Secret key must be str or bytes")
    if not secret_key:
        raise SigningKeyError("Secret key must not be empty")
    return bytes(secret_key)


def encode_token(claims: Dict[str, Any], secret_key: bytes, algorithm: str) -> str:
    try:
        return jwt.encode(claims, secret_key, algorithm=algorithm)
    except JOSEError as e:
        # jose refuses PEM-looking HMAC keys and unknown algorithms
        raise SigningKeyError(str(e)) from e


def load_unverified(token: str) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Parse header and claims without checking the signature.

    Raises ``jose.JWTError`` when the token is not three base64url segments
    carrying JSON objects.
    """
    header = jwt.get_unverified_header(token)
    claims = jwt.get_unverified_claims(token)
    return header, claims


def decode_token(token: str, secret_key: bytes, algorithm: str) -> Dict[str, Any]:
    """Verify the signature and time claims, returning the claim set.

    Raises ``jose.JWTError`` or one of its subclasses.
    """
    return jwt.decode(
        token,
        secret_key,
        algorithms=[algorithm],
        options=_DECODE_OPTIONS,
    )
