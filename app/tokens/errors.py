"""Errors raised while issuing or verifying credentials.

Issuer-side errors (``EncodingError``, ``SigningKeyError``) point at a bug or
a misconfiguration. Verifier-side errors all derive from
``CredentialRejected`` and are caused by untrusted input; callers translate
them into a single "not authenticated" response.
"""


class TokenError(Exception):
    """Base class for every token error."""


class EncodingError(TokenError):
    """The claim set could not be built from the given user id."""


class SigningKeyError(TokenError):
    """The secret key is missing, empty or unusable for the algorithm."""


class CredentialRejected(TokenError):
    """A presented credential was not accepted."""

    reason = "rejected"


class MalformedCredential(CredentialRejected):
    reason = "malformed"


class SignatureInvalid(CredentialRejected):
    reason = "signature_invalid"


class ClaimMissing(CredentialRejected):
    reason = "claim_missing"


class ClaimInvalid(CredentialRejected):
    reason = "claim_invalid"


class CredentialExpired(CredentialRejected):
    reason = "expired"
