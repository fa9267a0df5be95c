"""
Club Request/Response Models
Request fields are plain strings; an empty string means "not supplied"
"""

from pydantic import BaseModel
from datetime import date
from isd.records import TriState


class CreateClubRequest(BaseModel):
    """Request to create a new club"""
    name: str = ""
    country: str = ""
    province: str = ""
    district: str = ""
    establish_date: str = ""
    logo: str = ""
    address: str = ""
    pic: str = ""
    email_pic: str = ""
    discipline: str = ""
    phone_number: str = ""
    active: str = ""

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Jakarta Fencing Club",
                "country": "Indonesia",
                "province": "DKI Jakarta",
                "district": "Jakarta Selatan",
                "establish_date": "2010-05-17",
                "logo": "https://cdn.example.com/logos/jfc.png",
                "address": "Jl. Sudirman 1",
                "pic": "Budi",
                "email_pic": "budi@example.com",
                "discipline": "fencing",
                "phone_number": "+62211234567",
                "active": "TRUE",
            }
        }


class UpdateClubRequest(CreateClubRequest):
    """Request to update club details; only non-empty fields are applied"""
    id: str = ""


class ClubResponse(BaseModel):
    """Club details response"""
    id: str
    name: str
    country: str
    province: str
    district: str
    establish_date: date
    logo: str
    address: str
    email_pic: str
    pic: str
    discipline: str
    phone_number: str
    active: TriState

    class Config:
        from_attributes = True


class ClubListResponse(BaseModel):
    """List of clubs response"""
    total: int
    clubs: list[ClubResponse]


class UpdateClubResponse(BaseModel):
    club: ClubResponse
