"""
Authentication Routes
Sign in, sign out and the current account
"""

import logging

from fastapi import APIRouter, Depends

from isd.auth import get_current_account, get_token_manager
from isd.auth.tokens import TokenManager
from isd.records import Account
from isd.schemas.account import ProfileResponse, SignInRequest, SignInResponse
from isd.validation import FieldErrors

logger = logging.getLogger(__name__)

router = APIRouter()


def validate_credentials(request: SignInRequest):
    errors = FieldErrors()
    errors.require("email", request.email)
    errors.require("password", request.password)
    errors.raise_if_any()


@router.post("/signin", response_model=SignInResponse)
async def sign_in(
    request: SignInRequest,
    token_manager: TokenManager = Depends(get_token_manager),
):
    """
    Sign in with email and password

    Returns the account's current token while it is still valid, otherwise
    a new one valid for TOKEN_EXPIRATION_HOURS.
    """
    logger.info("SignIn ...")
    validate_credentials(request)

    token = await token_manager.sign_in(request.email, request.password)
    return {"token": token}


@router.post("/signout")
async def sign_out(
    request: SignInRequest,
    token_manager: TokenManager = Depends(get_token_manager),
):
    """Revoke the account's token"""
    logger.info("SignOut ...")
    validate_credentials(request)

    await token_manager.sign_out(request.email, request.password)
    return None


@router.get("/me", response_model=ProfileResponse)
async def get_me(account: Account = Depends(get_current_account)):
    """Get the account behind the bearer token"""
    return account
