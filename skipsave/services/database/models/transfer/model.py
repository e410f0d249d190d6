from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel

from skipsave.services.database.models.base import TIMESTAMP, new_id, utcnow


class TransferMethod(str, Enum):
    MANUAL = "manual"
    PLAID_SANDBOX = "plaid_sandbox"


class TransferStatus(str, Enum):
    PENDING_MANUAL = "pending_manual"
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    FAILED = "failed"


class Transfer(SQLModel, table=True):
    """A batch moving the value of one or more entries toward real savings."""

    id: str = Field(default_factory=new_id, primary_key=True)
    user_id: str = Field(foreign_key="user.id", ondelete="CASCADE", index=True)
    total_amount: Decimal = Field(max_digits=10, decimal_places=2)  # sum of linked entries at creation
    method: TransferMethod
    status: TransferStatus
    created_at: datetime = Field(default_factory=utcnow, sa_type=TIMESTAMP)
    completed_at: Optional[datetime] = Field(default=None, sa_type=TIMESTAMP)
