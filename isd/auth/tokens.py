"""
Token Management
Credential check and bearer token lifecycle
"""

import hashlib
import logging
import secrets
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable

from isd.errors import unauthorized
from isd.records import Account
from isd.storage import AccountStore, TokenStore

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "invalid email or password"
INVALID_TOKEN = "invalid or expired token"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_token() -> str:
    """
    Generate a new opaque token

    Returns:
        Hex encoded SHA-256 of a random UUID
    """
    return hashlib.sha256(str(uuid.uuid4()).encode()).hexdigest()


def is_token_expired(expired: datetime, now: datetime) -> bool:
    """A token expiring exactly now is still valid"""
    return expired < now


class TokenManager:
    """
    Signs accounts in and out

    Per account: no token -> sign in creates one -> it expires after
    ``lifetime`` -> the next sign in replaces it -> sign out deletes it.
    """

    def __init__(
        self,
        accounts: AccountStore,
        tokens: TokenStore,
        lifetime: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = utcnow,
    ):
        self.accounts = accounts
        self.tokens = tokens
        self.lifetime = lifetime
        self.clock = clock

    async def authenticate(self, email: str, password: str) -> Account:
        """
        Look up an account and check its password

        Unknown email and wrong password fail the same way so callers
        cannot tell which one was wrong.
        """
        accounts = await self.accounts.get_accounts(email=email)
        if not accounts:
            logger.info("no account for email %s", email)
            raise unauthorized(INVALID_CREDENTIALS)

        account = accounts[0]

        # Passwords are stored as submitted, see DESIGN.md
        if not secrets.compare_digest(account.password.encode(), password.encode()):
            logger.info("invalid password for account: %s", email)
            raise unauthorized(INVALID_CREDENTIALS)

        return account

    async def sign_in(self, email: str, password: str) -> str:
        """
        Return a valid token for the account

        A still valid token is returned unchanged; a missing or expired one
        is replaced by a fresh token expiring ``lifetime`` from now.
        """
        account = await self.authenticate(email, password)

        current = await self.tokens.get_token(account.id)
        now = self.clock()

        if current is not None and not is_token_expired(current.expired, now):
            return current.token

        token = generate_token()
        await self.tokens.delete_token(account.id)
        await self.tokens.create_token(account.id, token, now + self.lifetime)
        logger.debug("issued new token for account %s", account.id)
        return token

    async def sign_out(self, email: str, password: str):
        account = await self.authenticate(email, password)
        await self.tokens.delete_token(account.id)

    async def resolve(self, token: str) -> Account:
        """Account owning a live bearer token"""
        stored = await self.tokens.get_token_by_value(token)
        if stored is None or is_token_expired(stored.expired, self.clock()):
            raise unauthorized(INVALID_TOKEN)

        accounts = await self.accounts.get_accounts(ids=[stored.account_id])
        if not accounts:
            raise unauthorized(INVALID_TOKEN)

        return accounts[0]

