from decimal import Decimal
from typing import Any, Optional, Sequence

from loguru import logger
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from skipsave.services.database.models.base import to_money, utcnow
from skipsave.services.database.models.transfer.model import Transfer, TransferMethod, TransferStatus


async def list_transfers(db: AsyncSession, user_id: str) -> Sequence[Transfer]:
    result = await db.exec(
        select(Transfer).where(Transfer.user_id == user_id).order_by(col(Transfer.created_at).desc())
    )
    return result.all()


async def get_transfer(db: AsyncSession, transfer_id: str, user_id: str) -> Optional[Transfer]:
    result = await db.exec(select(Transfer).where(Transfer.id == transfer_id, Transfer.user_id == user_id))
    return result.first()


async def create_transfer(
    db: AsyncSession,
    user_id: str,
    total_amount: Decimal,
    method: TransferMethod,
    status: TransferStatus,
    commit: bool = True,
) -> Transfer:
    transfer = Transfer(user_id=user_id, total_amount=to_money(total_amount), method=method, status=status)
    db.add(transfer)
    if commit:
        await db.commit()
        await db.refresh(transfer)
    else:
        await db.flush()
    logger.debug(f"Created {method.value} transfer {transfer.id} ({status.value})")
    return transfer


async def update_transfer(
    db: AsyncSession, transfer_id: str, user_id: str, data: dict[str, Any], commit: bool = True
) -> Optional[Transfer]:
    transfer = await get_transfer(db, transfer_id, user_id)
    if not transfer:
        return None

    for key, value in data.items():
        setattr(transfer, key, value)

    db.add(transfer)
    if commit:
        await db.commit()
        await db.refresh(transfer)
    return transfer


async def complete_transfer(db: AsyncSession, transfer_id: str, user_id: str, commit: bool = True) -> Optional[Transfer]:
    # no check on the previous status, completing twice just moves completed_at
    return await update_transfer(
        db,
        transfer_id,
        user_id,
        {"status": TransferStatus.COMPLETED, "completed_at": utcnow()},
        commit=commit,
    )
