"""
Counsel Connect - Test Configuration and Fixtures

Provides async database sessions, test client, and helper fixtures
for all tests.
"""

import os
from datetime import date

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Set test environment BEFORE importing app code
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["DEBUG"] = "false"
os.environ["PASSWORD_HASH_ITERATIONS"] = "1000"  # keep hashing fast in tests
os.environ.pop("DB_HOST", None)

from src.database import Base, get_db
from src.main import app
from src.models import User, LawyerProfile, UserRole
from src.auth import hash_password


@pytest_asyncio.fixture
async def db():
    """Provide a session on a fresh in-memory database for each test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture
async def client(db):
    """Provide an async HTTP test client bound to the test database."""
    async def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_user(db):
    """Create a client user in the database."""
    user = User(
        name="Test Client",
        email="client@example.com",
        password_hash=hash_password("ClientPass123"),
        date_of_birth=date(1990, 5, 17),
        gender="female",
        role=UserRole.CLIENT,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest_asyncio.fixture
async def lawyer_user(db):
    """Create a lawyer user with a profile in the database."""
    user = User(
        name="Test Lawyer",
        email="lawyer@example.com",
        password_hash=hash_password("LawyerPass123"),
        date_of_birth=date(1980, 1, 2),
        gender="male",
        role=UserRole.LAWYER,
    )
    db.add(user)
    await db.flush()
    db.add(LawyerProfile(
        user_id=user.id,
        bar_number="BAR-1000",
        member_since=date(2010, 9, 1),
        specialization_1="Tax",
        specialization_2="Corporate",
    ))
    await db.commit()
    await db.refresh(user)
    return user


@pytest.fixture
def client_payload():
    """Registration body for a client."""
    return {
        "name": "Alice Client",
        "email": "alice@example.com",
        "password": "AlicePass123",
        "date_of_birth": "1992-03-04",
        "gender": "female",
        "role": "client",
    }


@pytest.fixture
def lawyer_payload():
    """Registration body for a lawyer."""
    return {
        "name": "Bob Lawyer",
        "email": "bob@example.com",
        "password": "BobPass123",
        "date_of_birth": "1975-11-30",
        "gender": "male",
        "role": "lawyer",
        "bar_number": "B1",
        "member_since": "2001-06-15",
        "specialization_1": "Family",
        "specialization_2": "Tax",
    }
