from datetime import timedelta

from fastapi import APIRouter, Depends

from skipsave.api.dependencies import CurrentUserId, DbSession, write_rate_limit
from skipsave.api.schemas import BankAccountOut, LinkTokenOut
from skipsave.services.bank import get_provider_for_user
from skipsave.services.database.models.base import utcnow

router = APIRouter(prefix="/bank", tags=["bank"])

MOCK_LINK_TOKEN = "link-sandbox-mock-token"


@router.post("/link", response_model=LinkTokenOut, dependencies=[Depends(write_rate_limit)])
async def create_link_token(user_id: CurrentUserId):
    """Mock bank-link token, valid for an hour"""
    return LinkTokenOut(link_token=MOCK_LINK_TOKEN, expiration=utcnow() + timedelta(hours=1))


@router.get("/accounts", response_model=list[BankAccountOut])
async def list_bank_accounts(db: DbSession, user_id: CurrentUserId):
    provider = await get_provider_for_user(db, user_id)
    return await provider.list_accounts(user_id)
