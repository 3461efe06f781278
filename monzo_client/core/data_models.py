"""Response models mirroring the Monzo API JSON payloads."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MonzoModel(BaseModel):
    """Base for response models: JSON types must match exactly, unknown keys are ignored."""

    model_config = ConfigDict(strict=True, extra="ignore")


class Account(MonzoModel):
    """A bank account visible to the access token."""

    id: str
    description: str
    created: datetime
    closed: Optional[bool] = None
    type: Optional[str] = None


class Accounts(MonzoModel):
    accounts: List[Account]


class Balance(MonzoModel):
    """Balance of an account, amounts in minor units of the currency."""

    balance: int
    currency: str = Field(description="ISO 4217 currency code")
    spend_today: int


class Transaction(MonzoModel):
    """A single transaction as returned by the API."""

    id: str
    amount: int
    currency: str
    description: str
    created: datetime
    metadata: Dict[str, str] = Field(default_factory=dict)
    account_balance: Optional[int] = None
    merchant: Optional[str] = None
    notes: Optional[str] = None
    is_load: Optional[bool] = None
    settled: Optional[datetime] = None
    category: Optional[str] = None
    decline_reason: Optional[str] = None

    @field_validator("settled", mode="before")
    @classmethod
    def _empty_settled_is_none(cls, value: Any) -> Any:
        # Pending transactions carry settled="" instead of null.
        if isinstance(value, str) and not value.strip():
            return None
        return value


class Transactions(MonzoModel):
    transactions: List[Transaction]


class TransactionResponse(MonzoModel):
    transaction: Transaction


class Pot(MonzoModel):
    """A savings pot attached to the user's account."""

    id: str
    name: str
    style: str
    balance: int
    currency: str
    created: datetime
    updated: datetime
    deleted: bool


class PotsResponse(MonzoModel):
    pots: List[Pot]


class ErrorResponse(MonzoModel):
    """Error body sent along with non-success status codes."""

    code: Optional[str] = None
    error: Optional[str] = None
    error_description: Optional[str] = None
    message: Optional[str] = None
