"""accounts and authorized sessions

Revision ID: 0001
Revises:
Create Date: 2026-10-19 12:00:00

"""
from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "accounts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.Date(), nullable=False),
    )
    op.create_index("ix_accounts_username", "accounts", ["username"], unique=True)

    op.create_table(
        "authorized_sessions",
        sa.Column("session_id", sa.String(length=36), primary_key=True),
        sa.Column("client_signature", sa.Text(), nullable=False),
        sa.Column("account_id", sa.Integer(), sa.ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("idx_authorized_sessions_account_id", "authorized_sessions", ["account_id"])


def downgrade() -> None:
    op.drop_index("idx_authorized_sessions_account_id", table_name="authorized_sessions")
    op.drop_table("authorized_sessions")
    op.drop_index("ix_accounts_username", table_name="accounts")
    op.drop_table("accounts")
