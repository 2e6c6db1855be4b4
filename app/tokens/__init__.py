"""Signed bearer credentials carrying a user id."""
from app.tokens.errors import (
    ClaimInvalid,
    ClaimMissing,
    CredentialExpired,
    CredentialRejected,
    EncodingError,
    MalformedCredential,
    SignatureInvalid,
    SigningKeyError,
    TokenError,
)
from app.tokens.issuer import TokenIssuer, issue
from app.tokens.verifier import TokenVerifier, verify

__all__ = [
    "ClaimInvalid",
    "ClaimMissing",
    "CredentialExpired",
    "CredentialRejected",
    "EncodingError",
    "MalformedCredential",
    "SignatureInvalid",
    "SigningKeyError",
    "TokenError",
    "TokenIssuer",
    "TokenVerifier",
    "issue",
    "verify",
]
