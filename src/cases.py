"""
Counsel Connect - Lawyer Case Notes
"""

from typing import List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.case import LawyerCase


async def add_case(db: AsyncSession, lawyer_user_id: int, title: str, details: str) -> LawyerCase:
    """Append a case note. The creation time is assigned here, not by the client."""
    case = LawyerCase(
        lawyer_user_id=lawyer_user_id,
        title=title,
        details=details,
    )
    db.add(case)
    await db.commit()
    await db.refresh(case)
    return case


async def list_cases(db: AsyncSession, lawyer_user_id: int) -> List[LawyerCase]:
    """Get a lawyer's case notes, most recent first."""
    result = await db.execute(
        select(LawyerCase)
        .where(LawyerCase.lawyer_user_id == lawyer_user_id)
        .order_by(LawyerCase.created_at.desc(), LawyerCase.id.desc())
    )
    return list(result.scalars().all())
