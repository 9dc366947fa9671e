"""
Counsel Connect - Authentication Logic

Password hashing, registration and credential checks. Login is a one-shot
verification: no session or token is issued.
"""

import hashlib
import logging
import secrets
from datetime import date
from typing import Optional
from starlette.concurrency import run_in_threadpool
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config import settings
from src.errors import ValidationError, ConflictError
from src.models.user import User, UserRole, Gender
from src.models.lawyer_profile import LawyerProfile
from src.schemas import RegisterRequest

logger = logging.getLogger(__name__)


# =============================================================================
# PASSWORD UTILITIES
# =============================================================================

def hash_password(password: str, iterations: Optional[int] = None) -> str:
    """Hash a password using salted PBKDF2-SHA256.

    The result is ``iterations$salt$hash`` so the work factor can be raised
    later without invalidating stored hashes.
    """
    if iterations is None:
        iterations = settings.PASSWORD_HASH_ITERATIONS
    salt = secrets.token_hex(16)
    pwd_hash = hashlib.pbkdf2_hmac(
        'sha256',
        password.encode('utf-8'),
        salt.encode('utf-8'),
        iterations,
    ).hex()
    return f"{iterations}${salt}${pwd_hash}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    try:
        iterations, salt, stored_hash = hashed_password.split('$')
        pwd_hash = hashlib.pbkdf2_hmac(
            'sha256',
            plain_password.encode('utf-8'),
            salt.encode('utf-8'),
            int(iterations),
        ).hex()
        return secrets.compare_digest(pwd_hash, stored_hash)
    except ValueError:
        return False


# =============================================================================
# NORMALIZATION
# =============================================================================

def normalize(value: str) -> str:
    """Lowercase and trim. Applied to email, gender and role."""
    return str(value).lower().strip()


def is_missing(value) -> bool:
    return value is None or value == ""


def parse_id(value) -> int:
    """Convert a user or case id given as text into an int."""
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationError("Invalid request data", "INVALID_REQUEST")


def parse_date(value: str) -> date:
    """Parse an ISO ``YYYY-MM-DD`` date from a request body."""
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise ValidationError("Invalid date", "INVALID_DATE")


# =============================================================================
# USER OPERATIONS
# =============================================================================

async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    """Get a user by email address."""
    result = await db.execute(
        select(User).where(User.email == normalize(email))
    )
    return result.scalar_one_or_none()


async def get_profile_by_bar_number(db: AsyncSession, bar_number: str) -> Optional[LawyerProfile]:
    """Get a lawyer profile by bar number."""
    result = await db.execute(
        select(LawyerProfile).where(LawyerProfile.bar_number == bar_number)
    )
    return result.scalar_one_or_none()


async def register_user(db: AsyncSession, data: RegisterRequest) -> User:
    """
    Register a client or a lawyer.

    Checks run in a fixed order and the first failure is raised: base
    fields, gender, role, date of birth format, email uniqueness, then for
    lawyers the lawyer fields, member_since format and bar number
    uniqueness. Lawyer-only fields are ignored for clients. All checks
    happen before anything is written, and a lawyer's user row and profile
    are committed in the same transaction, so a rejected registration
    leaves nothing behind.

    Raises:
        ValidationError: missing base or lawyer fields, invalid gender, role or date
        ConflictError: email or bar number already registered
    """
    base_fields = (data.name, data.email, data.password, data.date_of_birth, data.gender, data.role)
    if any(is_missing(value) for value in base_fields):
        raise ValidationError("Missing required fields", "MISSING_FIELDS")

    gender = normalize(data.gender)
    role = normalize(data.role)
    email = normalize(data.email)

    if gender not in Gender.ALL:
        raise ValidationError("Invalid gender", "INVALID_GENDER")

    if role not in UserRole.ALL:
        raise ValidationError("Invalid role", "INVALID_ROLE")

    date_of_birth = parse_date(data.date_of_birth)

    if await get_user_by_email(db, email):
        raise ConflictError("Email already exists", "DUPLICATE_EMAIL")

    if role == UserRole.LAWYER:
        if is_missing(data.bar_number) or is_missing(data.member_since) or is_missing(data.specialization_1):
            raise ValidationError("Missing lawyer fields", "MISSING_LAWYER_FIELDS")

        member_since = parse_date(data.member_since)

        if await get_profile_by_bar_number(db, data.bar_number):
            raise ConflictError("Bar number already exists", "DUPLICATE_BAR_NUMBER")

    user = User(
        name=data.name,
        email=email,
        password_hash=await run_in_threadpool(hash_password, data.password),
        date_of_birth=date_of_birth,
        gender=gender,
        role=role,
    )
    db.add(user)

    try:
        if role == UserRole.LAWYER:
            # Flush to obtain the generated user id for the profile
            await db.flush()
            db.add(LawyerProfile(
                user_id=user.id,
                bar_number=data.bar_number,
                member_since=member_since,
                specialization_1=data.specialization_1,
                specialization_2=data.specialization_2 or None,
                description=None,
            ))
        await db.commit()
    except IntegrityError as e:
        # A concurrent registration won the race past the checks above
        await db.rollback()
        if "bar_number" in str(e.orig):
            raise ConflictError("Bar number already exists", "DUPLICATE_BAR_NUMBER") from e
        raise ConflictError("Email already exists", "DUPLICATE_EMAIL") from e

    await db.refresh(user)
    logger.info(f"Registered {role} user {user.id}")
    return user


async def authenticate_user(db: AsyncSession, email: str, password: str) -> Optional[User]:
    """
    Authenticate a user by email and password.

    Returns the user if authentication succeeds, None otherwise. Unknown
    email and wrong password are deliberately indistinguishable.
    """
    user = await get_user_by_email(db, email)
    if not user:
        return None
    if not await run_in_threadpool(verify_password, password, user.password_hash):
        return None
    return user
