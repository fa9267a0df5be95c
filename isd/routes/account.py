"""
Account Routes
"""

import logging
import uuid

from fastapi import APIRouter, Depends, Query, status

from isd.auth import get_stores
from isd.records import Account
from isd.schemas.account import (
    CreateAccountRequest,
    UpdateAccountRequest,
    AccountListResponse,
    UpdateAccountResponse,
)
from isd.schemas.common import CreatedResponse, DeleteRequest
from isd.storage import Stores
from isd.validation import given_ids, merge, require_found, require_id, validate_create_account

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_account(request: CreateAccountRequest, stores: Stores = Depends(get_stores)):
    """
    Create an account

    Emails are unique; a duplicate is rejected by the database.
    """
    logger.info("CreateAccount ...")
    validate_create_account(request)

    account = Account(
        id=str(uuid.uuid4()),
        name=request.name,
        email=request.email,
        password=request.password,
    )

    account_id = await stores.accounts.create_account(account)
    return {"id": account_id}


@router.get("", response_model=AccountListResponse)
async def list_accounts(
    id: list[str] = Query(default=[], description="Only return these account ids"),
    stores: Stores = Depends(get_stores),
):
    logger.info("GetAccount ...")
    accounts = await stores.accounts.get_accounts(ids=given_ids(id))
    return {"total": len(accounts), "accounts": accounts}


@router.put("", response_model=UpdateAccountResponse)
async def update_account(request: UpdateAccountRequest, stores: Stores = Depends(get_stores)):
    """Update an account; only non-empty fields are applied"""
    logger.info("UpdateAccount ...")
    account_id = require_id(request.id)

    current = require_found(await stores.accounts.get_accounts(ids=[account_id]))

    account = merge(
        current,
        name=request.name,
        email=request.email,
        password=request.password,
    )

    await stores.accounts.update_account(account)
    return {"account": account}


@router.delete("")
async def delete_account(request: DeleteRequest, stores: Stores = Depends(get_stores)):
    """Delete an account together with its token"""
    logger.info("DeleteAccount ...")
    account_id = require_id(request.id)

    require_found(await stores.accounts.get_accounts(ids=[account_id]))
    await stores.tokens.delete_token(account_id)
    await stores.accounts.delete_account(account_id)
    return None
