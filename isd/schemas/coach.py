"""
Coach Request Models
"""

from pydantic import BaseModel


class CreateCoachRequest(BaseModel):
    name: str = ""
    dob: str = ""
    phone_number: str = ""
    gender: str = ""
    email: str = ""
    discipline: str = ""
    register_date: str = ""
    active: str = ""
