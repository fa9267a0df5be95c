"""
Authentication Dependencies
Access to the app-wide stores and bearer token authentication
"""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from isd.auth.tokens import INVALID_TOKEN, TokenManager
from isd.errors import unauthorized
from isd.records import Account
from isd.storage import Stores

# Security scheme; a missing header is reported by get_current_account
security = HTTPBearer(auto_error=False)


def get_stores(request: Request) -> Stores:
    """Stores built by the application factory"""
    return request.app.state.stores


def get_token_manager(request: Request) -> TokenManager:
    return request.app.state.token_manager


async def get_current_account(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    token_manager: TokenManager = Depends(get_token_manager),
) -> Account:
    """
    Get the account owning the bearer token

    Raises:
        APIError: 401 if the header is missing or the token is unknown or expired
    """
    if credentials is None or not credentials.credentials:
        raise unauthorized(INVALID_TOKEN)

    return await token_manager.resolve(credentials.credentials)
