"""
Account and Sign-in Request/Response Models
"""

from pydantic import BaseModel


class CreateAccountRequest(BaseModel):
    name: str = ""
    email: str = ""
    password: str = ""


class UpdateAccountRequest(CreateAccountRequest):
    id: str = ""


class AccountResponse(BaseModel):
    """Account details; the password is returned as stored"""
    id: str
    name: str
    email: str
    password: str

    class Config:
        from_attributes = True


class AccountListResponse(BaseModel):
    total: int
    accounts: list[AccountResponse]


class UpdateAccountResponse(BaseModel):
    account: AccountResponse


class ProfileResponse(BaseModel):
    """Account behind the bearer token"""
    id: str
    name: str
    email: str


class SignInRequest(BaseModel):
    email: str = ""
    password: str = ""


class SignInResponse(BaseModel):
    token: str
