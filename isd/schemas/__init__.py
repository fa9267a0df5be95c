"""
Pydantic schemas for request/response validation
"""

from isd.schemas.common import CreatedResponse, DeleteRequest, ErrorResponse
from isd.schemas.club import (
    CreateClubRequest,
    UpdateClubRequest,
    ClubResponse,
    ClubListResponse,
    UpdateClubResponse,
)
from isd.schemas.organizer import (
    CreateOrganizerRequest,
    UpdateOrganizerRequest,
    OrganizerResponse,
    OrganizerListResponse,
    UpdateOrganizerResponse,
)
from isd.schemas.athlete import (
    CreateAthleteRequest,
    UpdateAthleteRequest,
    AthleteResponse,
    AthleteListResponse,
    UpdateAthleteResponse,
)
from isd.schemas.coach import CreateCoachRequest
from isd.schemas.account import (
    CreateAccountRequest,
    UpdateAccountRequest,
    AccountResponse,
    AccountListResponse,
    UpdateAccountResponse,
    ProfileResponse,
    SignInRequest,
    SignInResponse,
)

__all__ = [
    "CreatedResponse",
    "DeleteRequest",
    "ErrorResponse",
    "CreateClubRequest",
    "UpdateClubRequest",
    "ClubResponse",
    "ClubListResponse",
    "UpdateClubResponse",
    "CreateOrganizerRequest",
    "UpdateOrganizerRequest",
    "OrganizerResponse",
    "OrganizerListResponse",
    "UpdateOrganizerResponse",
    "CreateAthleteRequest",
    "UpdateAthleteRequest",
    "AthleteResponse",
    "AthleteListResponse",
    "UpdateAthleteResponse",
    "CreateCoachRequest",
    "CreateAccountRequest",
    "UpdateAccountRequest",
    "AccountResponse",
    "AccountListResponse",
    "UpdateAccountResponse",
    "ProfileResponse",
    "SignInRequest",
    "SignInResponse",
]
