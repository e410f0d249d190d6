from decimal import Decimal
from typing import Sequence

from sqlmodel.ext.asyncio.session import AsyncSession

from skipsave.services.bank.base import BankAccount, ProviderCapabilities, TransferResult
from skipsave.services.database.models.transfer.crud import complete_transfer, create_transfer
from skipsave.services.database.models.transfer.model import TransferMethod, TransferStatus


class ManualTransferProvider:
    """Default provider: the user moves the money themselves and ticks it off."""

    method = TransferMethod.MANUAL
    display_name = "Manual Transfer"
    capabilities = ProviderCapabilities(simulate_transfers=False, manual_checklist=True)

    async def list_accounts(self, user_id: str) -> list[BankAccount]:
        # account labels are typed in by the user instead
        return []

    async def create_transfer(
        self, db: AsyncSession, user_id: str, entry_ids: Sequence[str], total_amount: Decimal
    ) -> TransferResult:
        transfer = await create_transfer(
            db, user_id, total_amount, self.method, TransferStatus.PENDING_MANUAL, commit=False
        )
        return TransferResult(transfer_id=transfer.id, status=TransferStatus.PENDING_MANUAL)

    def after_commit(self, user_id: str, result: TransferResult) -> None:
        pass

    async def mark_completed(self, db: AsyncSession, user_id: str, transfer_id: str) -> None:
        await complete_transfer(db, transfer_id, user_id, commit=False)
