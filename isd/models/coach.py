"""
Coach Model
"""

from sqlalchemy import Column, String, Date
from isd.database import Base


class Coach(Base):
    __tablename__ = "coach"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False, index=True)
    dob = Column(String(255), nullable=False)
    phone_number = Column(String(20), nullable=False)
    gender = Column(String(6), nullable=False)
    email = Column(String(255), nullable=False)
    discipline = Column(String(255), nullable=False)
    register_date = Column(Date, nullable=False)

    # Status
    active = Column(String(10), nullable=False, default="UNKNOWN")
