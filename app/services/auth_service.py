"""Login and identity resolution on top of the token issuer/verifier.

Both entry points return an explicit result object instead of raising or
returning None, so routers have to branch on `state`.
"""
from dataclasses import dataclass
from typing import Any, Optional
import logging

from sqlalchemy.orm import Session

from app.core.constants import AuthState
from app.models.user import User
from app.services.user_service import UserService
from app.tokens import CredentialRejected, TokenIssuer, TokenVerifier
from app.tokens.types import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    state: AuthState
    user: Optional[User] = None
    token: Optional[str] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.state is AuthState.AUTHENTICATED


@dataclass(frozen=True)
class IdentityResult:
    state: AuthState
    user_id: Optional[UserId] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.state is AuthState.RESOLVED


class AuthService:

    @staticmethod
    def login(db: Session, email: str, password: str, issuer: TokenIssuer) -> LoginResult:
        """
        Email/password login
        - Look up the user by email
        - Check the password against the stored hash
        - Issue a credential for the user id
        """
        logger.debug("%s: login attempt for %s", AuthState.AUTHENTICATING.value, email)
        user = UserService.find_by_email(db, email)
        if user is None:
            return LoginResult(AuthState.UNAUTHENTICATED, reason="unknown_email")

        if not UserService.authenticate(db, user, password):
            return LoginResult(AuthState.UNAUTHENTICATED, reason="bad_password")

        token = issuer.issue(user.id)
        return LoginResult(AuthState.AUTHENTICATED, user=user, token=token)

    @staticmethod
    def resolve(credential: Any, verifier: TokenVerifier) -> IdentityResult:
        """Turn a presented credential into a user id, or a rejection."""
        logger.debug("%s: verifying credential", AuthState.PRESENTING.value)
        try:
            user_id = verifier.verify(credential)
        except CredentialRejected as e:
            return IdentityResult(AuthState.REJECTED, reason=e.reason)
        return IdentityResult(AuthState.RESOLVED, user_id=user_id)
