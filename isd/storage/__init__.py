"""
Persistence layer
One store per entity, all sharing a single databases.Database
"""

from databases import Database

from isd.storage.base import build_in_clause
from isd.storage.club import ClubStore
from isd.storage.organizer import OrganizerStore
from isd.storage.athlete import AthleteStore
from isd.storage.coach import CoachStore
from isd.storage.account import AccountStore, TokenStore
from isd.storage.verif_code import VerificationCodeStore


class Stores:
    """Every store, built over one database handle"""

    def __init__(self, database: Database):
        self.database = database
        self.clubs = ClubStore(database)
        self.organizers = OrganizerStore(database)
        self.athletes = AthleteStore(database)
        self.coaches = CoachStore(database)
        self.accounts = AccountStore(database)
        self.tokens = TokenStore(database)
        self.verif_codes = VerificationCodeStore(database)


__all__ = [
    "build_in_clause",
    "Stores",
    "ClubStore",
    "OrganizerStore",
    "AthleteStore",
    "CoachStore",
    "AccountStore",
    "TokenStore",
    "VerificationCodeStore",
]
