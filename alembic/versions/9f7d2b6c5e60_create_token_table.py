"""Create token table

Revision ID: 9f7d2b6c5e60
Revises: 8e6c1a5b4d50
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "9f7d2b6c5e60"
down_revision = "8e6c1a5b4d50"
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "token",
        sa.Column("account_id", sa.String(36), nullable=False),
        sa.Column("token", sa.Text(), nullable=False),
        sa.Column("expired", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["account_id"], ["account.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("account_id"),
    )
    op.create_index(op.f("ix_token_token"), "token", ["token"])


def downgrade():
    op.drop_index(op.f("ix_token_token"), table_name="token")
    op.drop_table("token")
