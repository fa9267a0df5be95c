"""
Organizer Routes
"""

import logging
import uuid

from fastapi import APIRouter, Depends, Query, status

from isd.auth import get_stores
from isd.records import Organizer
from isd.schemas.organizer import (
    CreateOrganizerRequest,
    UpdateOrganizerRequest,
    OrganizerListResponse,
    UpdateOrganizerResponse,
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
    validate_create_organizer,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_organizer(request: CreateOrganizerRequest, stores: Stores = Depends(get_stores)):
    """
    Register an organizer with a club

    The club is not looked up first; an unknown **club_id** fails on the
    foreign key.
    """
    logger.info("CreateOrganizer ...")
    validate_create_organizer(request)

    organizer = Organizer(
        id=str(uuid.uuid4()),
        name=request.name,
        position=request.position,
        club_id=request.club_id,
        register_date=parse_date(request.register_date),
        phone_number=request.phone_number,
        active=active_or_unknown(request.active),
        email=request.email,
    )

    organizer_id = await stores.organizers.create_organizer(organizer)
    return {"id": organizer_id}


@router.get("", response_model=OrganizerListResponse)
async def list_organizers(
    id: list[str] = Query(default=[], description="Only return these organizer ids"),
    stores: Stores = Depends(get_stores),
):
    """List organizers, each with its club"""
    logger.info("GetOrganizer ...")
    organizers = await stores.organizers.get_organizers(*given_ids(id))
    return {"total": len(organizers), "organizers": organizers}


@router.put("", response_model=UpdateOrganizerResponse)
async def update_organizer(request: UpdateOrganizerRequest, stores: Stores = Depends(get_stores)):
    """Update an organizer; only non-empty fields are applied"""
    logger.info("UpdateOrganizer ...")
    organizer_id = require_id(request.id)

    current = require_found(await stores.organizers.get_organizers(organizer_id))

    organizer = merge(
        current.base(),
        name=request.name,
        position=request.position,
        register_date=(
            parse_request_date(request.register_date, "register_date")
            if request.register_date else None
        ),
        phone_number=request.phone_number,
        active=parse_active(request.active) if request.active else None,
        email=request.email,
    )

    await stores.organizers.update_organizer(organizer)

    updated = require_found(await stores.organizers.get_organizers(organizer_id))
    return {"organizer": updated}


@router.delete("")
async def delete_organizer(request: DeleteRequest, stores: Stores = Depends(get_stores)):
    """Delete an organizer"""
    logger.info("DeleteOrganizer ...")
    organizer_id = require_id(request.id)

    require_found(await stores.organizers.get_organizers(organizer_id))
    await stores.organizers.delete_organizer(organizer_id)
    return None
