"""Service layer package."""

__all__ = [
    "auth_service",
    "user_service",
]
