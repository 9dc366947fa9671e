"""
Counsel Connect - Lawyer Profile Model
"""

from datetime import date
from typing import Optional
from sqlalchemy import String, Date, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column
from src.database import Base


class LawyerProfile(Base):
    """Professional details of a user registered with the lawyer role.

    Created together with the user row at registration. Only the
    description changes afterwards.
    """

    __tablename__ = "lawyer_profiles"

    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), primary_key=True)

    # Bar admission
    bar_number: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    member_since: Mapped[date] = mapped_column(Date, nullable=False)

    # Practice areas
    specialization_1: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    specialization_2: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)

    # Free text shown to clients
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<LawyerProfile {self.user_id}: {self.bar_number}>"
