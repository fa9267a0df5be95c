"""
Organizer Request/Response Models
"""

from pydantic import BaseModel
from datetime import date
from isd.records import TriState
from isd.schemas.club import ClubResponse


class CreateOrganizerRequest(BaseModel):
    """Request to register an organizer with a club"""
    name: str = ""
    position: str = ""
    club_id: str = ""
    register_date: str = ""
    phone_number: str = ""
    active: str = ""
    email: str = ""


class UpdateOrganizerRequest(BaseModel):
    """Organizer update; the club cannot be changed"""
    id: str = ""
    name: str = ""
    position: str = ""
    register_date: str = ""
    phone_number: str = ""
    active: str = ""
    email: str = ""


class OrganizerResponse(BaseModel):
    """Organizer with a snapshot of its club"""
    id: str
    name: str
    position: str
    club: ClubResponse
    register_date: date
    phone_number: str
    active: TriState
    email: str

    class Config:
        from_attributes = True


class OrganizerListResponse(BaseModel):
    total: int
    organizers: list[OrganizerResponse]


class UpdateOrganizerResponse(BaseModel):
    organizer: OrganizerResponse
