"""create admins, users, topups, plans, notifications and investments

Revision ID: 3f1c9a2b7d10
Revises:
Create Date: 2026-10-19 09:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f1c9a2b7d10"
down_revision = None
branch_labels = None
depends_on = None

MONEY = sa.Numeric(18, 2)


def upgrade() -> None:
    op.create_table(
        "admins",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_by_id", sa.String(length=36), nullable=False),
        sa.Column("created_by_username", sa.String(length=50), nullable=False),
        sa.Column("last_seen_at", sa.DateTime(timezone=True)),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
    )
    op.create_index("ix_admins_username", "admins", ["username"], unique=True)

    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=100), unique=True),
        sa.Column("full_name", sa.String(length=120)),
        sa.Column("wallet_balance", MONEY, nullable=False, server_default="0"),
        sa.Column("wallet_topup", MONEY, nullable=False, server_default="0"),
        sa.Column("wallet_profits", MONEY, nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
        sa.CheckConstraint("wallet_balance >= 0", name="wallet_balance_non_negative"),
        sa.CheckConstraint("wallet_topup >= 0", name="wallet_topup_non_negative"),
        sa.CheckConstraint("wallet_profits >= 0", name="wallet_profits_non_negative"),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "topups",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("user_id", sa.String(length=36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("amount", MONEY, nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint("amount > 0", name="topup_amount_positive"),
    )
    op.create_index("ix_topups_user_id", "topups", ["user_id"])

    op.create_table(
        "plans",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False, unique=True),
        sa.Column("min_amount", MONEY, nullable=False),
        sa.Column("max_amount", MONEY, nullable=False),
        sa.Column("roi_percentage", sa.Numeric(7, 2), nullable=False),
        sa.Column("duration_days", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint("min_amount <= max_amount", name="plan_limits_ordered"),
    )

    op.create_table(
        "notifications",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("expiry_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("targets", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_notifications_expiry_date", "notifications", ["expiry_date"])

    op.create_table(
        "investments",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("user_id", sa.String(length=36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("plan_id", sa.String(length=36), sa.ForeignKey("plans.id"), nullable=False),
        sa.Column("amount", MONEY, nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="active"),
        sa.Column("expiry_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_investments_user_id", "investments", ["user_id"])
    op.create_index("ix_investments_plan_id", "investments", ["plan_id"])
    op.create_index("ix_investments_status", "investments", ["status"])
    op.create_index("ix_investments_expiry_date", "investments", ["expiry_date"])


def downgrade() -> None:
    op.drop_index("ix_investments_expiry_date", table_name="investments")
    op.drop_index("ix_investments_status", table_name="investments")
    op.drop_index("ix_investments_plan_id", table_name="investments")
    op.drop_index("ix_investments_user_id", table_name="investments")
    op.drop_table("investments")
    op.drop_index("ix_notifications_expiry_date", table_name="notifications")
    op.drop_table("notifications")
    op.drop_table("plans")
    op.drop_index("ix_topups_user_id", table_name="topups")
    op.drop_table("topups")
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
    op.drop_index("ix_admins_username", table_name="admins")
    op.drop_table("admins")
