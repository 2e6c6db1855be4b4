import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.dependencies.auth import get_current_user, get_token_issuer
from app.dependencies.rate_limit import rate_limit
from app.models.user import User
from app.schemas.auth import LoginRequest, LoginResponse
from app.schemas.common import ErrorResponse
from app.schemas.user import UserRead
from app.services.auth_service import AuthService
from app.tokens import TokenIssuer
from app.utils.errors import InvalidCredentialsError
from app.utils.helpers import get_client_ip

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"])

_unauthorized = {401: {"model": ErrorResponse}}


@router.post("/login", response_model=LoginResponse, status_code=200, responses=_unauthorized)
async def login(
    request: LoginRequest,
    http_request: Request,
    db: Session = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer),
    _: None = Depends(rate_limit),
):
    """
    Email/password login
    - Verify credentials
    - Return the user and a signed credential
    """
    result = AuthService.login(db, request.email, request.password, issuer)
    if not result.ok:
        # unknown email and wrong password look the same to the caller
        logger.info(
            "Login failed for %s from %s: %s",
            request.email,
            get_client_ip(http_request),
            result.reason,
        )
        raise InvalidCredentialsError()

    return LoginResponse(user=UserRead.model_validate(result.user), token=result.token)


@router.get(
    "/profile",
    response_model=UserRead,
    responses={**_unauthorized, 404: {"model": ErrorResponse}},
)
async def profile(current_user: User = Depends(get_current_user)):
    """Return the user identified by the presented credential."""
    return current_user
