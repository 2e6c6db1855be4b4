import logging
from typing import Any, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.constants import MAX_RECORD_ID
from app.core.security import hash_password, password_needs_rehash, verify_password
from app.models.user import User
from app.utils.errors import UserAlreadyExistsError, UserNotFoundError

logger = logging.getLogger(__name__)


class UserService:
    """Data access for user records.

    `find_by_*` return None when nothing matches; `get_user` and the
    mutating helpers raise `UserNotFoundError` instead.
    """

    @staticmethod
    def find_by_email(db: Session, email: str) -> Optional[User]:
        if not email:
            return None
        return db.query(User).filter(User.email == email.strip().lower()).first()

    @staticmethod
    def find_by_id(db: Session, user_id: Any) -> Optional[User]:
        try:
            user_id = int(user_id)
        except (TypeError, ValueError):
            return None
        if not 1 <= user_id <= MAX_RECORD_ID:
            return None
        return db.get(User, user_id)

    @staticmethod
    def authenticate(db: Session, user: User, password: str) -> bool:
        if not verify_password(password, user.password_hash):
            return False
        if password_needs_rehash(user.password_hash):
            user.password_hash = hash_password(password)
            db.commit()
            logger.info("Rehashed password for user %s", user.id)
        return True

    @staticmethod
    def list_users(db: Session) -> List[User]:
        return db.query(User).order_by(User.id).all()

    @staticmethod
    def get_user(db: Session, user_id: Any) -> User:
        user = UserService.find_by_id(db, user_id)
        if not user:
            raise UserNotFoundError()
        return user

    @staticmethod
    def create_user(db: Session, email: str, password: str) -> User:
        if UserService.find_by_email(db, email):
            raise UserAlreadyExistsError("Email already registered")

        user = User(email=email, password_hash=hash_password(password))
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            # lost a race with a concurrent insert of the same email
            db.rollback()
            raise UserAlreadyExistsError("Email already registered")
        db.refresh(user)
        logger.info("Created user %s", user.id)
        return user

    @staticmethod
    def update_user(db: Session, user_id: Any, payload: dict) -> User:
        user = UserService.get_user(db, user_id)

        email = payload.get("email")
        if email is not None:
            existing = UserService.find_by_email(db, email)
            if existing and existing.id != user.id:
                raise UserAlreadyExistsError("Email already registered")
            user.email = email

        password = payload.get("password")
        if password is not None:
            user.password_hash = hash_password(password)

        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise UserAlreadyExistsError("Email already registered")
        db.refresh(user)
        return user

    @staticmethod
    def delete_user(db: Session, user_id: Any) -> None:
        user = UserService.get_user(db, user_id)
        db.delete(user)
        db.commit()
        logger.info("Deleted user %s", user_id)
