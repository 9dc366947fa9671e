"""
Counsel Connect - Request Bodies

Every field is optional at the schema level. Presence is checked by the
handlers so a missing field yields the specific 400 message for that
endpoint instead of a generic validation error. Empty strings count as
missing.
"""

from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, field_validator


class RequestBody(BaseModel):
    """Base for JSON request bodies."""

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def empty_string_to_none(cls, value):
        if isinstance(value, str) and value == "":
            return None
        return value


class RegisterRequest(RequestBody):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    date_of_birth: Optional[str] = None  # YYYY-MM-DD, parsed by src.auth.parse_date
    gender: Optional[str] = None
    role: Optional[str] = None

    # Lawyer only
    bar_number: Optional[str] = None
    member_since: Optional[str] = None  # YYYY-MM-DD
    specialization_1: Optional[str] = None
    specialization_2: Optional[str] = None


class LoginRequest(RequestBody):
    email: Optional[str] = None
    password: Optional[str] = None


class RateRequest(RequestBody):
    lawyer_user_id: Optional[int] = None
    client_user_id: Optional[int] = None
    rating: Optional[Union[int, str]] = None  # parsed by src.lawyers.parse_rating


class DescriptionUpdateRequest(RequestBody):
    user_id: Optional[int] = None
    description: Optional[str] = None


class CaseCreateRequest(RequestBody):
    lawyer_user_id: Optional[int] = None
    title: Optional[str] = None
    details: Optional[str] = None
