"""
Shared persistence helpers
Named-parameter query building and driver error translation
"""

import logging
from typing import Iterable, Optional

from databases import Database

from isd.database import enforce_foreign_keys
from isd.errors import StorageError

logger = logging.getLogger(__name__)

SECRET_PARAMS = ("password", "token", "code")


def build_in_clause(column: str, prefix: str, values: Iterable) -> tuple[str, dict]:
    """
    Build an ``IN`` condition with one named bind parameter per value

    Example:
        >>> build_in_clause("id", "club_id", ["a", "b"])
        ('id IN (:club_id_0,:club_id_1)', {'club_id_0': 'a', 'club_id_1': 'b'})

    Raises:
        ValueError: no values given (an empty IN list is not valid SQL)
    """
    params = {}
    placeholders = []
    for index, value in enumerate(values):
        key = f"{prefix}_{index}"
        placeholders.append(f":{key}")
        params[key] = value

    if not placeholders:
        raise ValueError("build_in_clause needs at least one value")

    return f"{column} IN ({','.join(placeholders)})", params


def redact(params: Optional[dict]) -> dict:
    """Copy of bind parameters that is safe to log"""
    return {
        key: "***" if key in SECRET_PARAMS else value
        for key, value in (params or {}).items()
    }


class Store:
    """Base class for the per-entity stores"""

    entity = ""

    def __init__(self, database: Database):
        self.database = database

    def _fail(self, action: str, error: Exception, params: Optional[dict] = None) -> StorageError:
        message = f"failed to {action} {self.entity} data"
        logger.error("%s: %s (args=%s)", message, error, redact(params))
        return StorageError(f"{message}: {error}")

    async def _fetch_all(self, action: str, query: str, params: Optional[dict] = None) -> list:
        try:
            return await self.database.fetch_all(query, params or {})
        except Exception as e:
            raise self._fail(action, e, params) from e

    async def _fetch_one(self, action: str, query: str, params: Optional[dict] = None):
        try:
            return await self.database.fetch_one(query, params or {})
        except Exception as e:
            raise self._fail(action, e, params) from e

    async def _execute(self, action: str, query: str, params: dict):
        try:
            async with self.database.connection() as connection:
                await enforce_foreign_keys(self.database, connection)
                await connection.execute(query, params)
        except Exception as e:
            raise self._fail(action, e, params) from e

    async def _select(self, action: str, query: str, column: str, prefix: str, ids: tuple) -> list:
        """Run ``query`` unfiltered, or filtered to ``column IN ids`` when ids are given"""
        params = {}
        if ids:
            condition, params = build_in_clause(column, prefix, ids)
            query = f"{query} WHERE {condition}"
        return await self._fetch_all(action, query, params)
