"""
Coach Routes
Only create and delete until the coach update/list contract is settled
"""

import logging
import uuid

from fastapi import APIRouter, Depends, status

from isd.auth import get_stores
from isd.records import Coach
from isd.schemas.coach import CreateCoachRequest
from isd.schemas.common import CreatedResponse, DeleteRequest
from isd.storage import Stores
from isd.validation import (
    active_or_unknown,
    parse_date,
    require_found,
    require_id,
    validate_create_coach,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_coach(request: CreateCoachRequest, stores: Stores = Depends(get_stores)):
    """
    Register a coach

    **dob** is kept as free text; **register_date** is yyyy-mm-dd.
    """
    logger.info("CreateCoach ...")
    validate_create_coach(request)

    coach = Coach(
        id=str(uuid.uuid4()),
        name=request.name,
        dob=request.dob,
        phone_number=request.phone_number,
        gender=request.gender,
        email=request.email,
        discipline=request.discipline,
        register_date=parse_date(request.register_date),
        active=active_or_unknown(request.active),
    )

    coach_id = await stores.coaches.create_coach(coach)
    return {"id": coach_id}


@router.delete("")
async def delete_coach(request: DeleteRequest, stores: Stores = Depends(get_stores)):
    logger.info("DeleteCoach ...")
    coach_id = require_id(request.id)

    require_found(await stores.coaches.get_coaches(coach_id))
    await stores.coaches.delete_coach(coach_id)
    return None
