"""
Domain records - storage-side shapes shared by stores and routes.

Rows coming back from the database are validated into these models, which
also smooths over driver differences: asyncpg hands back ``date`` and
``datetime`` objects while SQLite hands back ISO strings.
"""

from datetime import date, datetime, timezone
from enum import Enum
from pydantic import BaseModel, field_validator


# === ENUMS ===

class TriState(str, Enum):
    """Tri-state boolean; UNKNOWN is the unset default, never a request value"""
    UNKNOWN = "UNKNOWN"
    TRUE = "TRUE"
    FALSE = "FALSE"


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


class Record(BaseModel):
    """Base for every record built from a database row"""

    @classmethod
    def from_row(cls, row):
        return cls.model_validate(dict(row))

    def to_params(self) -> dict:
        """Bind parameters for INSERT/UPDATE statements"""
        return {
            key: value.value if isinstance(value, Enum) else value
            for key, value in self.model_dump().items()
        }


# === CLUB ===

class Club(Record):
    id: str
    name: str
    country: str
    province: str
    district: str  # kabupaten
    establish_date: date
    logo: str
    address: str
    email_pic: str
    pic: str
    discipline: str
    phone_number: str
    active: TriState = TriState.UNKNOWN


# === ORGANIZER ===

class Organizer(Record):
    """Base organizer record as stored in the organizer table"""
    id: str
    name: str
    position: str
    club_id: str
    register_date: date
    phone_number: str
    active: TriState = TriState.UNKNOWN
    email: str = ""


class OrganizerWithClub(Organizer):
    """Organizer plus a snapshot of its club, assembled from a join at read time"""
    club: Club

    @classmethod
    def from_row(cls, row):
        data = dict(row)
        club = {
            key[len("club_"):]: data.pop(key)
            for key in list(data)
            if key.startswith("club_") and key != "club_id"
        }
        club["id"] = data["club_id"]
        data["club"] = club
        return cls.model_validate(data)

    def base(self) -> Organizer:
        return Organizer.model_validate(self.model_dump(exclude={"club"}))


# === ATHLETE ===

class Athlete(Record):
    id: str
    club_id: str
    name: str
    dob: date
    phone_number: str
    gender: Gender
    email: str
    register_date: date
    active: TriState = TriState.UNKNOWN


# === COACH ===

class Coach(Record):
    id: str
    name: str
    dob: str
    phone_number: str
    gender: str = ""
    email: str
    discipline: str
    register_date: date
    active: TriState = TriState.UNKNOWN


# === ACCOUNT ===

class Account(Record):
    id: str
    name: str
    email: str
    password: str


class Token(Record):
    account_id: str
    token: str
    expired: datetime

    @field_validator("expired")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite drops the offset; every expiry is written in UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class VerificationCode(Record):
    account_id: str
    code: str

