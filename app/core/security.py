"""Password hashing for stored user records."""
from passlib.context import CryptContext

pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
)


def hash_password(password: str) -> str:
    if not password or not isinstance(password, str):
        raise ValueError("Password must be a non-empty string")
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not plain_password or not hashed_password:
        return False
    if not isinstance(plain_password, str):
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except Exception:
        # unknown or corrupt hash format
        return False


def password_needs_rehash(hashed_password: str) -> bool:
    """True when the stored hash uses outdated argon2 parameters."""
    try:
        return pwd_context.needs_update(hashed_password)
    except ValueError:
        return False
