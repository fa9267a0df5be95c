"""
Athlete Store
"""

from isd.records import Athlete
from isd.storage.base import Store

CREATE_ATHLETE_SQL = """
    INSERT INTO athlete (
        id, club_id, name, dob, phone_number, gender, email, register_date, active
    ) VALUES (
        :id, :club_id, :name, :dob, :phone_number, :gender, :email, :register_date, :active
    )
"""

RETRIEVE_ATHLETE_SQL = """
    SELECT
        id, club_id, name, dob, phone_number, gender, email, register_date, active
    FROM athlete
"""

UPDATE_ATHLETE_SQL = """
    UPDATE athlete SET
        club_id = :club_id,
        name = :name,
        dob = :dob,
        phone_number = :phone_number,
        gender = :gender,
        email = :email,
        register_date = :register_date,
        active = :active
    WHERE id = :id
"""

DELETE_ATHLETE_SQL = "DELETE FROM athlete WHERE id = :id"


class AthleteStore(Store):
    """Persistence for athletes"""

    entity = "athlete"

    async def create_athlete(self, athlete: Athlete) -> str:
        await self._execute("create", CREATE_ATHLETE_SQL, athlete.to_params())
        return athlete.id

    async def get_athletes(self, *ids: str) -> list[Athlete]:
        rows = await self._select("retrieve", RETRIEVE_ATHLETE_SQL, "id", "athlete_id", ids)
        return [Athlete.from_row(row) for row in rows]

    async def update_athlete(self, athlete: Athlete):
        await self._execute("update", UPDATE_ATHLETE_SQL, athlete.to_params())

    async def delete_athlete(self, athlete_id: str):
        await self._execute("delete", DELETE_ATHLETE_SQL, {"id": athlete_id})
