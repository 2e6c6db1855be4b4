from sqlalchemy import Column, String
from sqlalchemy.orm import validates
from app.core.database import Base
from app.models.base import IDMixin, TimestampMixin


class User(IDMixin, TimestampMixin, Base):
    __tablename__ = "users"

    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)

    def __repr__(self):
        return f"<User {self.email}>"

    @validates("email")
    def normalize_email(self, key, value):
        return value.strip().lower() if value else value
