"""
Club Routes
Create, list, update and delete clubs
"""

import logging
import uuid

from fastapi import APIRouter, Depends, Query, status

from isd.auth import get_stores
from isd.records import Club
from isd.schemas.club import (
    CreateClubRequest,
    UpdateClubRequest,
    ClubListResponse,
    UpdateClubResponse,
)
from isd.schemas.common import CreatedResponse, DeleteRequest
from isd.storage import Stores
from isd.validation import (
    active_or_unknown,
    given_ids,
    merge,
    parse_active,
    parse_date,
    parse_request_date,
    require_found,
    require_id,
    validate_create_club,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_club(request: CreateClubRequest, stores: Stores = Depends(get_stores)):
    """
    Create a new club

    Every field except **active** is required; **establish_date** is yyyy-mm-dd
    and **active** is TRUE or FALSE when given.
    """
    logger.info("CreateClub ...")
    validate_create_club(request)

    club = Club(
        id=str(uuid.uuid4()),
        name=request.name,
        country=request.country,
        province=request.province,
        district=request.district,
        establish_date=parse_date(request.establish_date),
        logo=request.logo,
        address=request.address,
        pic=request.pic,
        email_pic=request.email_pic,
        discipline=request.discipline,
        phone_number=request.phone_number,
        active=active_or_unknown(request.active),
    )

    club_id = await stores.clubs.create_club(club)
    return {"id": club_id}


@router.get("", response_model=ClubListResponse)
async def list_clubs(
    id: list[str] = Query(default=[], description="Only return these club ids"),
    stores: Stores = Depends(get_stores),
):
    """List all clubs, or the clubs with the given ids"""
    logger.info("GetClub ...")
    clubs = await stores.clubs.get_clubs(*given_ids(id))
    return {"total": len(clubs), "clubs": clubs}


@router.put("", response_model=UpdateClubResponse)
async def update_club(request: UpdateClubRequest, stores: Stores = Depends(get_stores)):
    """
    Update club details

    Only non-empty fields overwrite the stored values.
    """
    logger.info("UpdateClub ...")
    club_id = require_id(request.id)

    current = require_found(await stores.clubs.get_clubs(club_id))

    club = merge(
        current,
        active=parse_active(request.active) if request.active else None,
        name=request.name,
        country=request.country,
        province=request.province,
        district=request.district,
        establish_date=(
            parse_request_date(request.establish_date, "establish_date")
            if request.establish_date else None
        ),
        logo=request.logo,
        address=request.address,
        pic=request.pic,
        email_pic=request.email_pic,
        discipline=request.discipline,
        phone_number=request.phone_number,
    )

    await stores.clubs.update_club(club)

    updated = require_found(await stores.clubs.get_clubs(club_id))
    return {"club": updated}


@router.delete("")
async def delete_club(request: DeleteRequest, stores: Stores = Depends(get_stores)):
    """
    Delete a club

    Clubs still referenced by organizers or athletes are rejected by the database.
    """
    logger.info("DeleteClub ...")
    club_id = require_id(request.id)

    require_found(await stores.clubs.get_clubs(club_id))
    await stores.clubs.delete_club(club_id)
    return None
