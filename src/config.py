"""
Counsel Connect - Configuration Settings
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import model_validator
from sqlalchemy.engine import URL
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Application
    APP_NAME: str = "Counsel Connect"
    APP_DESCRIPTION: str = "Matching clients with lawyers by specialization and rating"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./data/counsel_connect.db"

    # MySQL connection parameters (used instead of DATABASE_URL when DB_HOST is set)
    DB_HOST: Optional[str] = None
    DB_PORT: int = 3306
    DB_USER: Optional[str] = None
    DB_PASS: Optional[str] = None
    DB_NAME: Optional[str] = None

    # Security
    PASSWORD_HASH_ITERATIONS: int = 100000  # PBKDF2 work factor

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    @model_validator(mode="after")
    def assemble_database_url(self):
        """Build a MySQL URL from the DB_* parameters when they are provided."""
        if self.DB_HOST:
            self.DATABASE_URL = URL.create(
                "mysql+aiomysql",
                username=self.DB_USER,
                password=self.DB_PASS,
                host=self.DB_HOST,
                port=self.DB_PORT,
                database=self.DB_NAME,
            ).render_as_string(hide_password=False)
        return self

    @model_validator(mode="after")
    def validate_hash_iterations(self):
        """Refuse a work factor too small to slow down brute forcing."""
        if self.PASSWORD_HASH_ITERATIONS < 1000:
            raise ValueError("PASSWORD_HASH_ITERATIONS must be at least 1000")
        return self


# Create settings instance
settings = Settings()
