from decimal import Decimal

from fastapi import APIRouter, Depends, status
from loguru import logger

from skipsave.api.dependencies import CurrentUserId, DbSession, write_rate_limit
from skipsave.api.errors import InvalidRequestError, NotFoundError
from skipsave.api.schemas import TransferCreate, TransferOut
from skipsave.services.bank import get_provider_for_user
from skipsave.services.database.models.entry.crud import get_entries_by_ids, link_entries_to_transfer
from skipsave.services.database.models.transfer.crud import complete_transfer, get_transfer, list_transfers

router = APIRouter(prefix="/transfers", tags=["transfers"])


@router.get("", response_model=list[TransferOut])
async def get_transfers(db: DbSession, user_id: CurrentUserId):
    return await list_transfers(db, user_id)


@router.post(
    "",
    response_model=TransferOut,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(write_rate_limit)],
)
async def create_transfer(payload: TransferCreate, db: DbSession, user_id: CurrentUserId):
    """Sweep the given entries into one transfer.

    The total comes from the stored entries, never from the client. Ids that
    do not resolve to one of the caller's entries are ignored.
    """
    entries = await get_entries_by_ids(db, payload.entry_ids, user_id)
    if not entries:
        raise InvalidRequestError("No valid entries selected")

    entry_ids = [entry.id for entry in entries]
    total_amount = sum((entry.amount for entry in entries), Decimal("0.00"))
    provider = await get_provider_for_user(db, user_id)

    # transfer row and entry links are committed together
    try:
        result = await provider.create_transfer(db, user_id, entry_ids, total_amount)
        await link_entries_to_transfer(db, entry_ids, result.transfer_id, user_id, commit=False)
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    logger.info(f"Transfer {result.transfer_id} created via {provider.method.value} for {len(entry_ids)} entries")
    provider.after_commit(user_id, result)

    return await get_transfer(db, result.transfer_id, user_id)


@router.post("/{transfer_id}/complete", response_model=TransferOut, dependencies=[Depends(write_rate_limit)])
async def mark_transfer_completed(transfer_id: str, db: DbSession, user_id: CurrentUserId):
    transfer = await get_transfer(db, transfer_id, user_id)
    if not transfer:
        raise NotFoundError("Transfer not found")

    provider = await get_provider_for_user(db, user_id)
    mark_completed = getattr(provider, "mark_completed", None)
    if mark_completed is not None:
        await mark_completed(db, user_id, transfer_id)

    return await complete_transfer(db, transfer_id, user_id)
