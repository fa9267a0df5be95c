"""
Organizer Model
Club staff; always read together with its club
"""

from sqlalchemy import Column, String, Date, ForeignKey
from sqlalchemy.orm import relationship
from isd.database import Base


class Organizer(Base):
    __tablename__ = "organizer"

    id = Column(String(36), primary_key=True)
    club_id = Column(String(36), ForeignKey("club.id"), nullable=False)
    name = Column(String(255), nullable=False, index=True)
    position = Column(String(255), nullable=False)
    register_date = Column(Date, nullable=False)
    email = Column(String(255), nullable=False)
    phone_number = Column(String(20), nullable=False)

    # Status
    active = Column(String(10), nullable=False, default="UNKNOWN")

    # Relationship
    club = relationship("Club", backref="organizers")
