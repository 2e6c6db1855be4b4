"""ORM models."""

__all__ = [
    "base",
    "user",
]
