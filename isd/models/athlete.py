"""
Athlete Model
"""

from sqlalchemy import Column, String, Date, ForeignKey
from sqlalchemy.orm import relationship
from isd.database import Base


class Athlete(Base):
    __tablename__ = "athlete"

    id = Column(String(36), primary_key=True)
    club_id = Column(String(36), ForeignKey("club.id"), nullable=False)
    name = Column(String(255), nullable=False, index=True)
    dob = Column(Date, nullable=False)
    phone_number = Column(String(20), nullable=False)
    gender = Column(String(6), nullable=False)
    email = Column(String(255), nullable=False)
    register_date = Column(Date, nullable=False)

    # Status
    active = Column(String(10), nullable=False, default="UNKNOWN")

    # Relationship
    club = relationship("Club", backref="athletes")
