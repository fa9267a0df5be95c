"""
Athlete Routes
"""

import logging
import uuid

from fastapi import APIRouter, Depends, Query, status

from isd.auth import get_stores
from isd.records import Athlete
from isd.schemas.athlete import (
    CreateAthleteRequest,
    UpdateAthleteRequest,
    AthleteListResponse,
    UpdateAthleteResponse,
)
from isd.schemas.common import CreatedResponse, DeleteRequest
from isd.storage import Stores
from isd.validation import (
    active_or_unknown,
    given_ids,
    merge,
    parse_active,
    parse_date,
    parse_gender,
    parse_request_date,
    require_found,
    require_id,
    validate_create_athlete,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_athlete(request: CreateAthleteRequest, stores: Stores = Depends(get_stores)):
    """Register an athlete with a club"""
    logger.info("CreateAthlete ...")
    validate_create_athlete(request)

    athlete = Athlete(
        id=str(uuid.uuid4()),
        club_id=request.club_id,
        name=request.name,
        dob=parse_date(request.dob),
        phone_number=request.phone_number,
        gender=parse_gender(request.gender),
        email=request.email,
        register_date=parse_date(request.register_date),
        active=active_or_unknown(request.active),
    )

    athlete_id = await stores.athletes.create_athlete(athlete)
    return {"id": athlete_id}


@router.get("", response_model=AthleteListResponse)
async def list_athletes(
    id: list[str] = Query(default=[], description="Only return these athlete ids"),
    stores: Stores = Depends(get_stores),
):
    logger.info("GetAthlete ...")
    athletes = await stores.athletes.get_athletes(*given_ids(id))
    return {"total": len(athletes), "athletes": athletes}


@router.put("", response_model=UpdateAthleteResponse)
async def update_athlete(request: UpdateAthleteRequest, stores: Stores = Depends(get_stores)):
    """Update an athlete; only non-empty fields are applied"""
    logger.info("UpdateAthlete ...")
    athlete_id = require_id(request.id)

    current = require_found(await stores.athletes.get_athletes(athlete_id))

    athlete = merge(
        current,
        club_id=request.club_id,
        name=request.name,
        dob=parse_request_date(request.dob, "dob") if request.dob else None,
        phone_number=request.phone_number,
        gender=parse_gender(request.gender) if request.gender else None,
        email=request.email,
        register_date=(
            parse_request_date(request.register_date, "register_date")
            if request.register_date else None
        ),
        active=parse_active(request.active) if request.active else None,
    )

    await stores.athletes.update_athlete(athlete)

    updated = require_found(await stores.athletes.get_athletes(athlete_id))
    return {"athlete": updated}


@router.delete("")
async def delete_athlete(request: DeleteRequest, stores: Stores = Depends(get_stores)):
    logger.info("DeleteAthlete ...")
    athlete_id = require_id(request.id)

    require_found(await stores.athletes.get_athletes(athlete_id))
    await stores.athletes.delete_athlete(athlete_id)
    return None
