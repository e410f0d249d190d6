from decimal import Decimal
from typing import Sequence

from loguru import logger
from sqlmodel.ext.asyncio.session import AsyncSession

from skipsave.services.bank.base import BankAccount, ProviderCapabilities, TransferResult
from skipsave.services.database.models.transfer.crud import complete_transfer, create_transfer
from skipsave.services.database.models.transfer.model import TransferMethod, TransferStatus
from skipsave.services.deps import get_db_service, get_scheduler_service

MOCK_ACCOUNTS = [
    BankAccount(id="acc_checking_1234", name="Checking Account (****1234)", balance=5420.50),
    BankAccount(id="acc_savings_5678", name="Savings Account (****5678)", balance=12350.75),
    BankAccount(id="acc_checking_9012", name="Joint Checking (****9012)", balance=8900.00),
]


class SandboxTransferProvider:
    """Demo-only provider: transfers are scheduled and complete on their own after a delay."""

    method = TransferMethod.PLAID_SANDBOX
    display_name = "Plaid Sandbox (Demo)"
    capabilities = ProviderCapabilities(simulate_transfers=True, manual_checklist=False)

    async def list_accounts(self, user_id: str) -> list[BankAccount]:
        return list(MOCK_ACCOUNTS)

    async def create_transfer(
        self, db: AsyncSession, user_id: str, entry_ids: Sequence[str], total_amount: Decimal
    ) -> TransferResult:
        transfer = await create_transfer(
            db, user_id, total_amount, self.method, TransferStatus.SCHEDULED, commit=False
        )
        return TransferResult(transfer_id=transfer.id, status=TransferStatus.SCHEDULED)

    def after_commit(self, user_id: str, result: TransferResult) -> None:
        async def auto_complete() -> None:
            async with get_db_service().with_session() as session:
                transfer = await complete_transfer(session, result.transfer_id, user_id)
            if transfer is None:
                logger.warning(f"Sandbox transfer {result.transfer_id} vanished before completion")
                return
            logger.info(f"Sandbox transfer {result.transfer_id} completed")

        get_scheduler_service().schedule(auto_complete, name=f"sandbox-complete-{result.transfer_id}")
