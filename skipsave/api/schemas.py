"""
Request and response shapes for the REST API.

Field names are snake_case in Python and camelCase on the wire.
"""
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from skipsave.services.database.models.base import as_naive_utc, to_money
from skipsave.services.database.models.transfer.model import TransferMethod, TransferStatus

MAX_AMOUNT = Decimal("99999999.99")

PositiveAmount = Annotated[Decimal, Field(gt=0, le=MAX_AMOUNT, allow_inf_nan=False)]
GoalAmount = Annotated[Decimal, Field(ge=0, le=MAX_AMOUNT, allow_inf_nan=False)]
Item = Annotated[str, Field(min_length=1, max_length=120)]
Category = Annotated[str, Field(max_length=50)]
Note = Annotated[str, Field(max_length=500)]


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def _cents(value: Decimal) -> Decimal:
    value = to_money(value)
    if value <= 0:
        raise ValueError("must be at least 0.01")
    return value


def _not_null(value):
    if value is None:
        raise ValueError("must not be null")
    return value


# ============== Entries ==============

class EntryCreate(ApiModel):
    item: Item
    amount: PositiveAmount
    category: Optional[Category] = None
    note: Optional[Note] = None
    date: Optional[datetime] = None

    @field_validator("amount")
    @classmethod
    def quantize_amount(cls, value: Decimal) -> Decimal:
        return _cents(value)

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_naive_utc(value)


class EntryUpdate(ApiModel):
    """Partial update: only the fields sent are touched."""

    item: Optional[Item] = None
    amount: Optional[PositiveAmount] = None
    category: Optional[Category] = None
    note: Optional[Note] = None
    date: Optional[datetime] = None

    @field_validator("item", "amount", "date")
    @classmethod
    def required_when_sent(cls, value):
        return _not_null(value)

    @field_validator("amount")
    @classmethod
    def quantize_amount(cls, value: Decimal) -> Decimal:
        return _cents(value)

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: datetime) -> datetime:
        return as_naive_utc(value)


class EntryOut(ApiModel):
    id: str
    user_id: str
    item: str
    amount: Decimal
    category: Optional[str]
    note: Optional[str]
    date: datetime
    created_at: datetime
    transfer_id: Optional[str]


# ============== Transfers ==============

class TransferCreate(ApiModel):
    entry_ids: list[str] = Field(min_length=1)


class TransferOut(ApiModel):
    id: str
    user_id: str
    total_amount: Decimal
    method: TransferMethod
    status: TransferStatus
    created_at: datetime
    completed_at: Optional[datetime]


# ============== Preferences & provider settings ==============

class ProviderUpdate(ApiModel):
    provider: TransferMethod
    from_account_label: Optional[str] = None
    to_account_label: Optional[str] = None
    plaid_from_id: Optional[str] = None
    plaid_to_id: Optional[str] = None


class PreferencesUpdate(ApiModel):
    monthly_goal: Optional[GoalAmount] = None
    yearly_goal: Optional[GoalAmount] = None
    bank_provider: Optional[TransferMethod] = None
    from_account_label: Optional[str] = None
    to_account_label: Optional[str] = None
    plaid_from_id: Optional[str] = None
    plaid_to_id: Optional[str] = None

    @field_validator("monthly_goal", "yearly_goal", "bank_provider")
    @classmethod
    def required_when_sent(cls, value):
        return _not_null(value)

    @field_validator("monthly_goal", "yearly_goal")
    @classmethod
    def quantize_goal(cls, value: Decimal) -> Decimal:
        return to_money(value)


class PreferenceOut(ApiModel):
    id: str
    user_id: str
    bank_provider: TransferMethod
    from_account_label: Optional[str]
    to_account_label: Optional[str]
    plaid_item_id: Optional[str]
    plaid_from_id: Optional[str]
    plaid_to_id: Optional[str]
    monthly_goal: Decimal
    yearly_goal: Decimal


class CapabilitiesOut(ApiModel):
    simulate_transfers: bool
    manual_checklist: bool


class ProviderInfo(ApiModel):
    provider: TransferMethod
    display_name: str
    capabilities: CapabilitiesOut
    from_account_label: Optional[str] = None
    to_account_label: Optional[str] = None


# ============== Bank ==============

class BankAccountOut(ApiModel):
    id: str
    name: str
    balance: Optional[float] = None


class LinkTokenOut(BaseModel):
    link_token: str
    expiration: datetime


# ============== Dashboard ==============

class DashboardOut(ApiModel):
    total_saved: Decimal
    saved_this_month: Decimal
    saved_this_year: Decimal
    streak: int
    monthly_goal: Decimal
    yearly_goal: Decimal
    monthly_progress: float  # percent, clamped to 100
    yearly_progress: float
    entry_count: int
    series: list[Decimal]  # daily totals, oldest first
