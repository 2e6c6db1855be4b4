"""Application constants."""
from enum import Enum


class AuthState(str, Enum):
    """Where a caller stands in the login / identity-resolution flow.

    Nothing is kept between requests: every authenticated request starts
    again at PRESENTING and ends in RESOLVED or REJECTED.
    """

    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"
    PRESENTING = "presenting"
    RESOLVED = "resolved"
    REJECTED = "rejected"



# Largest id a signed 64-bit INTEGER/BIGINT column can hold
MAX_RECORD_ID = 2**63 - 1
