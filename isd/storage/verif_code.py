"""
Verification Code Store
Not exposed over HTTP yet
"""

from isd.records import VerificationCode
from isd.storage.base import Store

CREATE_VERIF_CODE_SQL = """
    INSERT INTO verif_code (account_id, code)
    VALUES (:account_id, :code)
"""

RETRIEVE_VERIF_CODE_SQL = """
    SELECT account_id, code
    FROM verif_code
"""

DELETE_VERIF_CODE_SQL = "DELETE FROM verif_code WHERE code = :code"


class VerificationCodeStore(Store):
    """Persistence for account verification codes"""

    entity = "verification code"

    async def create_verif_code(self, verif_code: VerificationCode):
        await self._execute("create", CREATE_VERIF_CODE_SQL, verif_code.to_params())

    async def get_verif_codes(self, *account_ids: str) -> list[VerificationCode]:
        rows = await self._select(
            "retrieve", RETRIEVE_VERIF_CODE_SQL, "account_id", "account_id", account_ids
        )
        return [VerificationCode.from_row(row) for row in rows]

    async def delete_verif_code(self, code: str):
        await self._execute("delete", DELETE_VERIF_CODE_SQL, {"code": code})
