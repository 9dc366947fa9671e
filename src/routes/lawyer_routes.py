"""
Counsel Connect - Lawyer Routes

Discovery by specialization, profile view, description editing and ratings.
"""

from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_db
from src.errors import ValidationError
from src.schemas import RateRequest, DescriptionUpdateRequest
from src.auth import is_missing, parse_id
from src.lawyers import (
    search_lawyers,
    get_lawyer_profile,
    update_description,
    parse_rating,
    rate_lawyer,
)


router = APIRouter(tags=["lawyers"])


@router.get("/lawyers")
async def list_lawyers(
    specialization: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    """Lawyers with the given specialization, ordered by average rating."""
    if is_missing(specialization):
        raise ValidationError("Missing specialization", "MISSING_SPECIALIZATION")

    return await search_lawyers(db, specialization)


@router.post("/rate")
async def rate(
    data: RateRequest,
    db: AsyncSession = Depends(get_db),
):
    """Rate a lawyer from 1 to 5 stars. Rating again replaces the old score."""
    if data.lawyer_user_id is None or data.client_user_id is None or is_missing(data.rating):
        raise ValidationError("Missing fields", "MISSING_FIELDS")

    rating = parse_rating(data.rating)
    await rate_lawyer(db, data.lawyer_user_id, data.client_user_id, rating)
    return {"message": "Rated"}


# =============================================================================
# PROFILE
# =============================================================================

@router.get("/lawyer/profile")
async def lawyer_profile(
    user_id: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    """Full lawyer profile, used both by the lawyer and by clients."""
    if is_missing(user_id):
        raise ValidationError("Missing user_id", "MISSING_USER_ID")

    return await get_lawyer_profile(db, parse_id(user_id))


@router.put("/lawyer/description")
async def lawyer_description(
    data: DescriptionUpdateRequest,
    db: AsyncSession = Depends(get_db),
):
    """Replace the free-text description of a lawyer's profile."""
    if data.user_id is None:
        raise ValidationError("Missing user_id", "MISSING_USER_ID")

    await update_description(db, data.user_id, data.description)
    return {"message": "Description updated"}
