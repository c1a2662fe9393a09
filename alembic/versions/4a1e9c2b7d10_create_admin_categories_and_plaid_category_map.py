"""Create admin_categories and plaid_category_map tables.

Revision ID: 4a1e9c2b7d10
Revises:
Create Date: 2026-10-19
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "4a1e9c2b7d10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "admin_categories",
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("slug", sa.String(length=100), nullable=True),
        sa.Column("subcategory", sa.Text(), nullable=True),
        sa.Column("ledger_type", sa.String(length=20), nullable=False),
        sa.Column("budget_type", sa.String(length=20), nullable=False, server_default="FLEXIBLE"),
        sa.Column("plaid_primary", sa.Text(), nullable=True),
        sa.Column("plaid_detailed", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("color", sa.String(length=20), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "ledger_type IN ('INCOME', 'EXPENSE', 'TRANSFER', 'DEBT_CREDIT', 'ADJUSTMENT')",
            name="ck_admin_categories_ledger_type",
        ),
        sa.CheckConstraint(
            "budget_type IN ('FIXED', 'FLEXIBLE', 'NON_MONTHLY')",
            name="ck_admin_categories_budget_type",
        ),
    )
    op.create_index("ix_admin_categories_slug", "admin_categories", ["slug"], unique=True)

    # Rows reference categories by slug, not id.
    op.create_table(
        "plaid_category_map",
        sa.Column("plaid_primary", sa.String(length=100), nullable=False),
        sa.Column("plaid_detailed", sa.String(length=150), nullable=False),
        sa.Column("admin_category_slug", sa.String(length=100), nullable=False),
        sa.Column("ledger_type", sa.String(length=20), nullable=False),
        sa.Column("confidence", sa.Float(), nullable=False),
        sa.Column("source_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_plaid_category_map_plaid_primary", "plaid_category_map", ["plaid_primary"], unique=False
    )
    op.create_index(
        "ix_plaid_category_map_plaid_detailed", "plaid_category_map", ["plaid_detailed"], unique=False
    )


def downgrade() -> None:
    op.drop_index("ix_plaid_category_map_plaid_detailed", table_name="plaid_category_map")
    op.drop_index("ix_plaid_category_map_plaid_primary", table_name="plaid_category_map")
    op.drop_table("plaid_category_map")
    op.drop_index("ix_admin_categories_slug", table_name="admin_categories")
    op.drop_table("admin_categories")
