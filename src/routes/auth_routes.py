"""
Counsel Connect - Authentication Routes
"""

import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_db
from src.errors import ValidationError, AuthError
from src.models.user import UserRole
from src.schemas import RegisterRequest, LoginRequest
from src.auth import register_user, authenticate_user, is_missing


router = APIRouter(tags=["auth"])
logger = logging.getLogger(__name__)


# =============================================================================
# REGISTER
# =============================================================================

@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    data: RegisterRequest,
    db: AsyncSession = Depends(get_db),
):
    """Register a client, or a lawyer together with their profile."""
    user = await register_user(db, data)

    message = "Lawyer registered" if user.role == UserRole.LAWYER else "Registered"
    return {"message": message, "user_id": user.id}


# =============================================================================
# LOGIN
# =============================================================================

@router.post("/login")
async def login(
    data: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    """Verify credentials once. No session is created."""
    if is_missing(data.email) or is_missing(data.password):
        raise ValidationError("Missing email or password", "MISSING_CREDENTIALS")

    user = await authenticate_user(db, data.email, data.password)
    if not user:
        logger.info("Failed login attempt")
        raise AuthError("Invalid credentials", "INVALID_CREDENTIALS")

    logger.info(f"User {user.id} logged in")
    return {
        "message": "Logged in",
        "user": {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "role": user.role,
        },
    }
