import logging

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.models.user import User
from app.services.auth_service import AuthService
from app.services.user_service import UserService
from app.tokens import TokenIssuer, TokenVerifier
from app.utils.errors import Unauthorized, UserNotFoundError
from app.utils.helpers import extract_credential, get_client_ip

logger = logging.getLogger(__name__)


def get_token_issuer(request: Request) -> TokenIssuer:
    """Issuer built by `create_app` from the configured secret key."""
    return request.app.state.token_issuer


def get_token_verifier(request: Request) -> TokenVerifier:
    return request.app.state.token_verifier


async def get_current_user(
    request: Request,
    verifier: TokenVerifier = Depends(get_token_verifier),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the presented credential to a user.

    Every verifier failure becomes the same 401; the specific reason is only
    logged.
    """
    credential = extract_credential(request, settings.TOKEN_HEADER)
    result = AuthService.resolve(credential, verifier)
    if not result.ok:
        logger.warning(
            "Rejected credential from %s: %s", get_client_ip(request), result.reason
        )
        raise Unauthorized()

    user = UserService.find_by_id(db, result.user_id)
    if not user:
        raise UserNotFoundError()
    return user
