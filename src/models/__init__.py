# Counsel Connect - Models Package

from src.models.user import User, UserRole, Gender
from src.models.lawyer_profile import LawyerProfile
from src.models.review import LawyerReview, MIN_RATING, MAX_RATING
from src.models.case import LawyerCase

__all__ = [
    "User",
    "UserRole",
    "Gender",
    "LawyerProfile",
    "LawyerReview",
    "MIN_RATING",
    "MAX_RATING",
    "LawyerCase",
]
