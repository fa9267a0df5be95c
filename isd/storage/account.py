"""
Account Store
Accounts and their bearer tokens
"""

from datetime import datetime
from typing import Optional, Sequence

from isd.records import Account, Token
from isd.storage.base import Store, build_in_clause

CREATE_ACCOUNT_SQL = """
    INSERT INTO account (id, name, email, password)
    VALUES (:id, :name, :email, :password)
"""

RETRIEVE_ACCOUNT_SQL = """
    SELECT id, name, email, password
    FROM account
    WHERE TRUE
"""

UPDATE_ACCOUNT_SQL = """
    UPDATE account SET
        name = :name,
        email = :email,
        password = :password
    WHERE id = :id
"""

DELETE_ACCOUNT_SQL = "DELETE FROM account WHERE id = :id"

CREATE_TOKEN_SQL = """
    INSERT INTO token (account_id, token, expired)
    VALUES (:account_id, :token, :expired)
"""

RETRIEVE_TOKEN_SQL = """
    SELECT account_id, token, expired
    FROM token
"""

DELETE_TOKEN_SQL = "DELETE FROM token WHERE account_id = :account_id"


class AccountStore(Store):
    """Persistence for accounts"""

    entity = "account"

    async def create_account(self, account: Account) -> str:
        await self._execute("create", CREATE_ACCOUNT_SQL, account.to_params())
        return account.id

    async def get_accounts(
        self,
        ids: Sequence[str] = (),
        email: Optional[str] = None,
    ) -> list[Account]:
        """
        Accounts matching every given filter

        Args:
            ids: keep only these account ids (ignored when empty)
            email: keep only the account with this email

        Returns:
            All accounts when no filter is given
        """
        query = RETRIEVE_ACCOUNT_SQL
        params = {}

        if ids:
            condition, params = build_in_clause("id", "account_id", ids)
            query += f" AND {condition}"

        if email:
            query += " AND email = :email"
            params["email"] = email

        rows = await self._fetch_all("retrieve", query, params)
        return [Account.from_row(row) for row in rows]

    async def update_account(self, account: Account):
        await self._execute("update", UPDATE_ACCOUNT_SQL, account.to_params())

    async def delete_account(self, account_id: str):
        await self._execute("delete", DELETE_ACCOUNT_SQL, {"id": account_id})


class TokenStore(Store):
    """Persistence for bearer tokens, one row per account"""

    entity = "token"

    async def get_token(self, account_id: str) -> Optional[Token]:
        row = await self._fetch_one(
            "retrieve",
            f"{RETRIEVE_TOKEN_SQL} WHERE account_id = :account_id",
            {"account_id": account_id},
        )
        return Token.from_row(row) if row else None

    async def get_token_by_value(self, token: str) -> Optional[Token]:
        row = await self._fetch_one(
            "retrieve",
            f"{RETRIEVE_TOKEN_SQL} WHERE token = :token",
            {"token": token},
        )
        return Token.from_row(row) if row else None

    async def create_token(self, account_id: str, token: str, expired: datetime):
        """Insert a token row; fails if the account already has one"""
        await self._execute(
            "create",
            CREATE_TOKEN_SQL,
            {"account_id": account_id, "token": token, "expired": expired},
        )

    async def delete_token(self, account_id: str):
        """Delete the account's token; a missing row is not an error"""
        await self._execute("delete", DELETE_TOKEN_SQL, {"account_id": account_id})
