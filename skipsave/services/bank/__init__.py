from skipsave.services.bank.base import BankAccount, BankProvider, ProviderCapabilities, TransferResult
from skipsave.services.bank.registry import get_provider_by_name, get_provider_for_user

__all__ = [
    "BankAccount",
    "BankProvider",
    "ProviderCapabilities",
    "TransferResult",
    "get_provider_by_name",
    "get_provider_for_user",
]
