"""Data schemas for the categorization module."""

from pydantic import BaseModel, ConfigDict, Field

from budgethero.categorization.taxonomy import TransactionType


class ClassificationResult(BaseModel):
    """Best-guess category for one transaction.

    Produced fresh per call; the caller persists it onto its own record.
    """

    model_config = ConfigDict(frozen=True)

    category: str = Field(..., description="Detailed category name")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Heuristic match strength")
    type: TransactionType = Field(..., description="Accounting treatment")
