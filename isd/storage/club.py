"""
Club Store
SQL for club management
"""

from isd.records import Club
from isd.storage.base import Store

CREATE_CLUB_SQL = """
    INSERT INTO club (
        id, name, country, province, district, establish_date, logo,
        address, email_pic, pic, discipline, phone_number, active
    ) VALUES (
        :id, :name, :country, :province, :district, :establish_date, :logo,
        :address, :email_pic, :pic, :discipline, :phone_number, :active
    )
"""

RETRIEVE_CLUB_SQL = """
    SELECT
        id, name, country, province, district, establish_date, logo,
        address, email_pic, pic, discipline, phone_number, active
    FROM club
"""

UPDATE_CLUB_SQL = """
    UPDATE club SET
        name = :name,
        country = :country,
        province = :province,
        district = :district,
        establish_date = :establish_date,
        logo = :logo,
        address = :address,
        email_pic = :email_pic,
        pic = :pic,
        discipline = :discipline,
        phone_number = :phone_number,
        active = :active
    WHERE id = :id
"""

DELETE_CLUB_SQL = "DELETE FROM club WHERE id = :id"


class ClubStore(Store):
    """Persistence for clubs"""

    entity = "club"

    async def create_club(self, club: Club) -> str:
        """Insert one club; the id is generated by the caller"""
        await self._execute("create", CREATE_CLUB_SQL, club.to_params())
        return club.id

    async def get_clubs(self, *ids: str) -> list[Club]:
        """All clubs, or only those whose id is in ``ids``"""
        rows = await self._select("retrieve", RETRIEVE_CLUB_SQL, "id", "club_id", ids)
        return [Club.from_row(row) for row in rows]

    async def update_club(self, club: Club):
        await self._execute("update", UPDATE_CLUB_SQL, club.to_params())

    async def delete_club(self, club_id: str):
        await self._execute("delete", DELETE_CLUB_SQL, {"id": club_id})
