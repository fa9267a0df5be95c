"""
Authentication Module
Token generation, sign in/out and bearer token dependencies
"""

from isd.auth.tokens import TokenManager, generate_token, is_token_expired
from isd.auth.dependencies import (
    get_stores,
    get_token_manager,
    get_current_account,
)

__all__ = [
    "TokenManager",
    "generate_token",
    "is_token_expired",
    "get_stores",
    "get_token_manager",
    "get_current_account",
]
