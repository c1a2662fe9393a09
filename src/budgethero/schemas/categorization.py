"""Schemas for categorizing stored transactions."""

from pydantic import BaseModel, Field


class TransactionInput(BaseModel):
    """A transaction as handed over by the surrounding application.

    ``amount`` is signed: positive for money into the account.
    """

    description: str
    amount: float
    merchant: str | None = None
    plaid_primary: str | None = Field(None, description="Plaid personal finance primary code")
    plaid_detailed: str | None = Field(None, description="Plaid personal finance detailed code")
    plaid_confidence: str | None = Field(None, description="Plaid confidence level, e.g. 'HIGH'")


class CategoryMatch(BaseModel):
    """Category resolved for a transaction, with where it came from."""

    category_name: str
    category_slug: str | None = None
    category_id: str | None = None
    confidence: float = Field(..., ge=0.0, le=1.0)
    source: str = Field(..., description="plaid_detailed, plaid_primary or rules")
    ledger_type: str
    budget_type: str | None = None
