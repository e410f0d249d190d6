from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from sqlmodel.ext.asyncio.session import AsyncSession

from skipsave.services.database.models.transfer.model import TransferMethod, TransferStatus


@dataclass(frozen=True)
class BankAccount:
    id: str
    name: str
    balance: Optional[float] = None


@dataclass(frozen=True)
class ProviderCapabilities:
    simulate_transfers: bool
    manual_checklist: bool

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class TransferResult:
    transfer_id: str
    status: TransferStatus


class BankProvider(Protocol):
    """How a batch of entries turns into a transfer.

    Providers may also define ``mark_completed(db, user_id, transfer_id)``;
    callers check for it with ``getattr``.
    """

    method: TransferMethod
    display_name: str
    capabilities: ProviderCapabilities

    async def list_accounts(self, user_id: str) -> list[BankAccount]: ...

    async def create_transfer(
        self, db: AsyncSession, user_id: str, entry_ids: Sequence[str], total_amount: Decimal
    ) -> TransferResult:
        """Add the transfer row to the session without committing."""
        ...

    def after_commit(self, user_id: str, result: TransferResult) -> None:
        """Side effects that must only run once the transfer is stored."""
        ...
