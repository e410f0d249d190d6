from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlmodel import Field, SQLModel

from skipsave.services.database.models.base import TIMESTAMP, new_id, utcnow


class Entry(SQLModel, table=True):
    """An "as-if" purchase: money set aside instead of spent."""

    id: str = Field(default_factory=new_id, primary_key=True)
    user_id: str = Field(foreign_key="user.id", ondelete="CASCADE", index=True)
    item: str = Field(max_length=120)
    amount: Decimal = Field(max_digits=10, decimal_places=2)
    category: Optional[str] = Field(default=None, max_length=50, index=True)
    note: Optional[str] = Field(default=None, max_length=500)
    date: datetime = Field(default_factory=utcnow, sa_type=TIMESTAMP, index=True)  # effective date
    created_at: datetime = Field(default_factory=utcnow, sa_type=TIMESTAMP)
    transfer_id: Optional[str] = Field(default=None, foreign_key="transfer.id", ondelete="SET NULL", index=True)
