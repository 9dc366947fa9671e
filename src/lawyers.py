"""
Counsel Connect - Lawyer Discovery, Profiles and Ratings
"""

import logging
from typing import Optional, List
from sqlalchemy import select, update, func, or_
from sqlalchemy.dialects.mysql import insert as mysql_insert
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from src.errors import ValidationError, NotFoundError
from src.models.user import User, UserRole
from src.models.lawyer_profile import LawyerProfile
from src.models.review import LawyerReview, MIN_RATING, MAX_RATING

logger = logging.getLogger(__name__)


def _avg_rating():
    """Average over all reviews of a lawyer, 0 when there are none."""
    return func.coalesce(func.avg(LawyerReview.rating), 0).label("avg_rating")


def _lawyer_query(*columns):
    """Lawyers joined with their profile and (optionally absent) reviews."""
    return (
        select(*columns)
        .join(LawyerProfile, LawyerProfile.user_id == User.id)
        .outerjoin(LawyerReview, LawyerReview.lawyer_user_id == User.id)
        .where(User.role == UserRole.LAWYER)
        .group_by(*columns[:-1])
    )


# =============================================================================
# DISCOVERY
# =============================================================================

async def search_lawyers(db: AsyncSession, specialization: str) -> List[dict]:
    """
    List lawyers practicing the given specialization, best rated first.

    A lawyer matches when either of their two specializations equals the
    value exactly.
    """
    avg_rating = _avg_rating()
    stmt = (
        _lawyer_query(
            User.id,
            User.name,
            User.email,
            LawyerProfile.specialization_1,
            LawyerProfile.specialization_2,
            avg_rating,
        )
        .where(
            or_(
                LawyerProfile.specialization_1 == specialization,
                LawyerProfile.specialization_2 == specialization,
            )
        )
        .order_by(avg_rating.desc(), User.id)
    )
    result = await db.execute(stmt)

    return [
        {
            "id": row.id,
            "name": row.name,
            "email": row.email,
            "specialization_1": row.specialization_1,
            "specialization_2": row.specialization_2,
            "avg_rating": float(row.avg_rating),
        }
        for row in result.all()
    ]


# =============================================================================
# PROFILE
# =============================================================================

async def get_lawyer_profile(db: AsyncSession, user_id: int) -> dict:
    """
    Get a lawyer's full profile with their average rating.

    Raises:
        NotFoundError: no lawyer (with a profile) has this id
    """
    stmt = (
        _lawyer_query(
            User.id,
            User.name,
            User.email,
            LawyerProfile.bar_number,
            LawyerProfile.member_since,
            LawyerProfile.specialization_1,
            LawyerProfile.specialization_2,
            LawyerProfile.description,
            _avg_rating(),
        )
        .where(User.id == user_id)
        .limit(1)
    )
    result = await db.execute(stmt)
    row = result.first()
    if row is None:
        raise NotFoundError("Lawyer not found", "LAWYER_NOT_FOUND")

    profile = dict(row._mapping)
    profile["avg_rating"] = float(profile["avg_rating"])
    return profile


async def update_description(db: AsyncSession, user_id: int, description: Optional[str]) -> int:
    """
    Overwrite a lawyer's description.

    No existence check: updating an unknown id succeeds with zero rows
    affected. Returns the number of rows updated.
    """
    result = await db.execute(
        update(LawyerProfile)
        .where(LawyerProfile.user_id == user_id)
        .values(description=description or "")
    )
    await db.commit()
    return result.rowcount


# =============================================================================
# RATINGS
# =============================================================================

def parse_rating(value) -> int:
    """Parse a submitted rating into an int within the allowed range."""
    try:
        rating = int(str(value).strip())
    except ValueError:
        raise ValidationError("Rating must be between 1 and 5", "INVALID_RATING")
    if rating < MIN_RATING or rating > MAX_RATING:
        raise ValidationError("Rating must be between 1 and 5", "INVALID_RATING")
    return rating


def _upsert_statement(dialect: str, values: dict):
    """Build a dialect-native insert-or-update on (lawyer, client)."""
    if dialect == "mysql":
        stmt = mysql_insert(LawyerReview).values(**values)
        return stmt.on_duplicate_key_update(rating=stmt.inserted.rating)

    insert = sqlite_insert if dialect == "sqlite" else postgresql_insert
    stmt = insert(LawyerReview).values(**values)
    return stmt.on_conflict_do_update(
        index_elements=["lawyer_user_id", "client_user_id"],
        set_={"rating": stmt.excluded.rating},
    )


async def rate_lawyer(db: AsyncSession, lawyer_user_id: int, client_user_id: int, rating: int) -> None:
    """
    Record a client's rating of a lawyer.

    A client has at most one review per lawyer: rating again replaces the
    previous score instead of adding a row.
    """
    values = {
        "lawyer_user_id": lawyer_user_id,
        "client_user_id": client_user_id,
        "rating": rating,
    }
    dialect = db.get_bind().dialect.name

    if dialect in ("mysql", "sqlite", "postgresql"):
        await db.execute(_upsert_statement(dialect, values))
    else:
        # No native upsert available, fall back to select-then-write
        result = await db.execute(
            select(LawyerReview).where(
                LawyerReview.lawyer_user_id == lawyer_user_id,
                LawyerReview.client_user_id == client_user_id,
            )
        )
        review = result.scalar_one_or_none()
        if review:
            review.rating = rating
        else:
            db.add(LawyerReview(**values))

    await db.commit()
    logger.info(f"Client {client_user_id} rated lawyer {lawyer_user_id}: {rating}")
