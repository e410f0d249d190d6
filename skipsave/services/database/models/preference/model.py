from decimal import Decimal
from typing import Optional

from sqlmodel import Field, SQLModel

from skipsave.services.database.models.base import new_id
from skipsave.services.database.models.transfer.model import TransferMethod


class Preference(SQLModel, table=True):
    """Per-user settings, one row per user"""

    id: str = Field(default_factory=new_id, primary_key=True)
    user_id: str = Field(foreign_key="user.id", ondelete="CASCADE", unique=True, index=True)
    bank_provider: TransferMethod = Field(default=TransferMethod.MANUAL)
    from_account_label: Optional[str] = None
    to_account_label: Optional[str] = None
    plaid_item_id: Optional[str] = None
    plaid_from_id: Optional[str] = None
    plaid_to_id: Optional[str] = None
    monthly_goal: Decimal = Field(default=Decimal("0.00"), max_digits=10, decimal_places=2)
    yearly_goal: Decimal = Field(default=Decimal("0.00"), max_digits=10, decimal_places=2)
