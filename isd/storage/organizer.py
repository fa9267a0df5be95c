"""
Organizer Store
Organizers are always read joined with their club
"""

from isd.records import Organizer, OrganizerWithClub
from isd.storage.base import Store

CREATE_ORGANIZER_SQL = """
    INSERT INTO organizer (
        id, name, position, club_id, register_date, phone_number, active, email
    ) VALUES (
        :id, :name, :position, :club_id, :register_date, :phone_number, :active, :email
    )
"""

RETRIEVE_ORGANIZER_SQL = """
    SELECT
        o.id,
        o.name,
        o.position,
        o.register_date,
        o.phone_number,
        o.active,
        o.email,
        c.id AS club_id,
        c.name AS club_name,
        c.country AS club_country,
        c.province AS club_province,
        c.district AS club_district,
        c.establish_date AS club_establish_date,
        c.logo AS club_logo,
        c.address AS club_address,
        c.email_pic AS club_email_pic,
        c.pic AS club_pic,
        c.discipline AS club_discipline,
        c.phone_number AS club_phone_number,
        c.active AS club_active
    FROM organizer o
    JOIN club c ON o.club_id = c.id
"""

# club_id is fixed at creation
UPDATE_ORGANIZER_SQL = """
    UPDATE organizer SET
        name = :name,
        position = :position,
        register_date = :register_date,
        phone_number = :phone_number,
        active = :active,
        email = :email
    WHERE id = :id
"""

DELETE_ORGANIZER_SQL = "DELETE FROM organizer WHERE id = :id"


class OrganizerStore(Store):
    """Persistence for organizers"""

    entity = "organizer"

    async def create_organizer(self, organizer: Organizer) -> str:
        await self._execute("create", CREATE_ORGANIZER_SQL, organizer.to_params())
        return organizer.id

    async def get_organizers(self, *ids: str) -> list[OrganizerWithClub]:
        """Organizers with a snapshot of their club, optionally filtered by id"""
        rows = await self._select("retrieve", RETRIEVE_ORGANIZER_SQL, "o.id", "organizer_id", ids)
        return [OrganizerWithClub.from_row(row) for row in rows]

    async def update_organizer(self, organizer: Organizer):
        params = organizer.to_params()
        params.pop("club_id")
        await self._execute("update", UPDATE_ORGANIZER_SQL, params)

    async def delete_organizer(self, organizer_id: str):
        await self._execute("delete", DELETE_ORGANIZER_SQL, {"id": organizer_id})
