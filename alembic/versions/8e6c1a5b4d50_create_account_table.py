"""Create account table

Revision ID: 8e6c1a5b4d50
Revises: 7d5b0f4a3c40
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "8e6c1a5b4d50"
down_revision = "7d5b0f4a3c40"
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "account",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_index(op.f("ix_account_email"), "account", ["email"])


def downgrade():
    op.drop_index(op.f("ix_account_email"), table_name="account")
    op.drop_table("account")
