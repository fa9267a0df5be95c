"""
Athlete Request/Response Models
"""

from pydantic import BaseModel
from datetime import date
from isd.records import Gender, TriState


class CreateAthleteRequest(BaseModel):
    club_id: str = ""
    name: str = ""
    dob: str = ""
    phone_number: str = ""
    gender: str = ""
    email: str = ""
    register_date: str = ""
    active: str = ""


class UpdateAthleteRequest(CreateAthleteRequest):
    id: str = ""


class AthleteResponse(BaseModel):
    id: str
    club_id: str
    name: str
    dob: date
    phone_number: str
    gender: Gender
    email: str
    register_date: date
    active: TriState

    class Config:
        from_attributes = True


class AthleteListResponse(BaseModel):
    total: int
    athletes: list[AthleteResponse]


class UpdateAthleteResponse(BaseModel):
    athlete: AthleteResponse
