from sqlmodel import SQLModel

from skipsave.services.database.models.user import User
from skipsave.services.database.models.entry import Entry
from skipsave.services.database.models.transfer import Transfer, TransferMethod, TransferStatus
from skipsave.services.database.models.preference import Preference

__all__ = [
    "SQLModel",
    "User",
    "Entry",
    "Transfer",
    "TransferMethod",
    "TransferStatus",
    "Preference",
]
