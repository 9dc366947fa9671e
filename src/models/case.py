"""
Counsel Connect - Lawyer Case Model
"""

from datetime import datetime
from sqlalchemy import String, Integer, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column
from src.database import Base
from src.timestamps import now_utc


class LawyerCase(Base):
    """Append-only case note logged by a lawyer."""

    __tablename__ = "lawyer_cases"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    lawyer_user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    details: Mapped[str] = mapped_column(Text, nullable=False)

    # Assigned by the server, never by the client
    created_at: Mapped[datetime] = mapped_column(DateTime, default=now_utc, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<LawyerCase {self.id}: {self.title}>"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "details": self.details,
            "created_at": self.created_at,
        }
