"""
Account Models
Accounts, their bearer token and verification code
"""

from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from isd.database import Base


class Account(Base):
    __tablename__ = "account"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    # Stored as submitted, see DESIGN.md
    password = Column(Text, nullable=False)


class Token(Base):
    __tablename__ = "token"

    # One live token per account
    account_id = Column(String(36), ForeignKey("account.id", ondelete="CASCADE"), primary_key=True)
    token = Column(Text, nullable=False, index=True)
    expired = Column(DateTime(timezone=True), nullable=False)

    account = relationship("Account", backref="tokens")


class VerificationCode(Base):
    __tablename__ = "verif_code"

    account_id = Column(String(36), primary_key=True)
    code = Column(Text, nullable=False)
