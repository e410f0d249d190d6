from typing import Union

from sqlmodel.ext.asyncio.session import AsyncSession

from skipsave.services.bank.base import BankProvider
from skipsave.services.bank.manual import ManualTransferProvider
from skipsave.services.bank.sandbox import SandboxTransferProvider
from skipsave.services.database.models.preference.crud import get_preferences
from skipsave.services.database.models.transfer.model import TransferMethod

PROVIDERS: dict[TransferMethod, BankProvider] = {
    TransferMethod.MANUAL: ManualTransferProvider(),
    TransferMethod.PLAID_SANDBOX: SandboxTransferProvider(),
}


def get_provider_by_name(name: Union[str, TransferMethod, None]) -> BankProvider:
    try:
        return PROVIDERS[TransferMethod(name)]
    except ValueError:
        return PROVIDERS[TransferMethod.MANUAL]


async def get_provider_for_user(db: AsyncSession, user_id: str) -> BankProvider:
    prefs = await get_preferences(db, user_id)
    return get_provider_by_name(prefs.bank_provider if prefs else None)
