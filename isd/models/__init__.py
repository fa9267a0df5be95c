"""
Database Models
Import all models here for Alembic migrations
"""

from isd.models.club import Club
from isd.models.organizer import Organizer
from isd.models.athlete import Athlete
from isd.models.coach import Coach
from isd.models.account import Account, Token, VerificationCode

__all__ = [
    "Club",
    "Organizer",
    "Athlete",
    "Coach",
    "Account",
    "Token",
    "VerificationCode",
]
