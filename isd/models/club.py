"""
Club Model
Root entity; organizers and athletes belong to a club
"""

from sqlalchemy import Column, String, Text, Date
from isd.database import Base


class Club(Base):
    __tablename__ = "club"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False, index=True)
    country = Column(String(255), nullable=False)
    province = Column(String(255), nullable=False)
    district = Column(String(255), nullable=False)  # kabupaten
    establish_date = Column(Date, nullable=False)
    logo = Column(String(255), nullable=False)
    address = Column(Text, nullable=False)
    email_pic = Column(String(255), nullable=False)
    pic = Column(String(255), nullable=False)
    discipline = Column(String(255), nullable=False)
    phone_number = Column(String(20), nullable=False)

    # Status
    active = Column(String(10), nullable=False, default="UNKNOWN")
