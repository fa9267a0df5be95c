"""
Coach Store
"""

from isd.records import Coach
from isd.storage.base import Store

CREATE_COACH_SQL = """
    INSERT INTO coach (
        id, name, dob, phone_number, gender, email, discipline, register_date, active
    ) VALUES (
        :id, :name, :dob, :phone_number, :gender, :email, :discipline, :register_date, :active
    )
"""

RETRIEVE_COACH_SQL = """
    SELECT
        id, name, dob, phone_number, gender, email, discipline, register_date, active
    FROM coach
"""

DELETE_COACH_SQL = "DELETE FROM coach WHERE id = :id"


class CoachStore(Store):
    """
    Persistence for coaches

    Only create, lookup and delete: the update contract for coaches is
    not settled yet.
    """

    entity = "coach"

    async def create_coach(self, coach: Coach) -> str:
        await self._execute("create", CREATE_COACH_SQL, coach.to_params())
        return coach.id

    async def get_coaches(self, *ids: str) -> list[Coach]:
        rows = await self._select("retrieve", RETRIEVE_COACH_SQL, "id", "coach_id", ids)
        return [Coach.from_row(row) for row in rows]

    async def delete_coach(self, coach_id: str):
        await self._execute("delete", DELETE_COACH_SQL, {"id": coach_id})
