"""
Counsel Connect - User Model
"""

from datetime import date, datetime
from sqlalchemy import String, Date, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from src.database import Base
from src.timestamps import now_utc


class User(Base):
    """A registered client or lawyer."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # Authentication
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)  # lowercased, trimmed
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    # Profile
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    gender: Mapped[str] = mapped_column(String(10), nullable=False)  # male, female
    role: Mapped[str] = mapped_column(String(10), nullable=False, index=True)  # client, lawyer

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=now_utc)

    def __repr__(self) -> str:
        return f"<User {self.email} ({self.role})>"


# User roles
class UserRole:
    """User role constants."""
    CLIENT = "client"
    LAWYER = "lawyer"

    ALL = (CLIENT, LAWYER)


# Genders accepted at registration
class Gender:
    """Gender constants."""
    MALE = "male"
    FEMALE = "female"

    ALL = (MALE, FEMALE)
