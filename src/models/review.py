"""
Counsel Connect - Lawyer Review Model
"""

from sqlalchemy import Integer, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column
from src.database import Base


class LawyerReview(Base):
    """Star rating a client gave a lawyer.

    One row per (lawyer, client) pair: rating again overwrites the
    previous score. User ids are not foreign keys, the service does not
    check who is rating whom.
    """

    __tablename__ = "lawyer_reviews"
    __table_args__ = (
        UniqueConstraint("lawyer_user_id", "client_user_id", name="uq_lawyer_client"),
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_rating_range"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    lawyer_user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    client_user_id: Mapped[int] = mapped_column(Integer, nullable=False)

    rating: Mapped[int] = mapped_column(Integer, nullable=False)  # 1..5

    def __repr__(self) -> str:
        return f"<LawyerReview lawyer={self.lawyer_user_id} client={self.client_user_id}: {self.rating}>"


# Allowed rating range (inclusive)
MIN_RATING = 1
MAX_RATING = 5
