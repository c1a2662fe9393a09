"""Admin-maintained category table.

Rows are upserted by the seeding step and edited through the admin CRUD
endpoints of the surrounding application.
"""

from sqlalchemy import Boolean, CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from budgethero.models.base import BaseModel

LEDGER_TYPES = ("INCOME", "EXPENSE", "TRANSFER", "DEBT_CREDIT", "ADJUSTMENT")
BUDGET_TYPES = ("FIXED", "FLEXIBLE", "NON_MONTHLY")


class AdminCategory(BaseModel):
    """A spending/income category shown to users and targeted by Plaid mappings."""

    __tablename__ = "admin_categories"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str | None] = mapped_column(String(100), nullable=True, unique=True, index=True)
    subcategory: Mapped[str | None] = mapped_column(Text, nullable=True)
    ledger_type: Mapped[str] = mapped_column(String(20), nullable=False)
    budget_type: Mapped[str] = mapped_column(String(20), nullable=False, default="FLEXIBLE")
    plaid_primary: Mapped[str | None] = mapped_column(Text, nullable=True)
    plaid_detailed: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    color: Mapped[str] = mapped_column(String(20), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint(
            "ledger_type IN (" + ", ".join(f"'{t}'" for t in LEDGER_TYPES) + ")",
            name="ck_admin_categories_ledger_type",
        ),
        CheckConstraint(
            "budget_type IN (" + ", ".join(f"'{t}'" for t in BUDGET_TYPES) + ")",
            name="ck_admin_categories_budget_type",
        ),
    )

    def __repr__(self) -> str:
        return f"<AdminCategory(id={self.id}, name={self.name}, slug={self.slug})>"
