"""Plaid personal-finance code -> admin category slug lookup table.

Fully replaced on every seeding run.
"""

from sqlalchemy import Float, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from budgethero.models.base import BaseModel


class PlaidCategoryMap(BaseModel):
    """Maps a Plaid primary/detailed code pair to an admin category slug."""

    __tablename__ = "plaid_category_map"

    plaid_primary: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    plaid_detailed: Mapped[str] = mapped_column(String(150), nullable=False)
    admin_category_slug: Mapped[str] = mapped_column(String(100), nullable=False)
    ledger_type: Mapped[str] = mapped_column(String(20), nullable=False)
    confidence: Mapped[float] = mapped_column(Float, nullable=False, default=0.95)
    source_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        Index("ix_plaid_category_map_plaid_detailed", "plaid_detailed"),
    )

    def __repr__(self) -> str:
        return (
            f"<PlaidCategoryMap(id={self.id}, plaid_detailed={self.plaid_detailed}, "
            f"admin_category_slug={self.admin_category_slug})>"
        )
