"""
Counsel Connect - Lawyer Case Routes
"""

from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_db
from src.errors import ValidationError
from src.schemas import CaseCreateRequest
from src.auth import is_missing, parse_id
from src.cases import add_case, list_cases


router = APIRouter(prefix="/lawyer/cases", tags=["cases"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_case(
    data: CaseCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    """Log a new case note for a lawyer."""
    if data.lawyer_user_id is None or is_missing(data.title) or is_missing(data.details):
        raise ValidationError("Missing fields", "MISSING_FIELDS")

    case = await add_case(db, data.lawyer_user_id, data.title, data.details)
    return {"message": "Case added", "case_id": case.id}


@router.get("")
async def get_cases(
    user_id: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    """All case notes of a lawyer, newest first."""
    if is_missing(user_id):
        raise ValidationError("Missing user_id", "MISSING_USER_ID")

    cases = await list_cases(db, parse_id(user_id))
    return [case.to_dict() for case in cases]
