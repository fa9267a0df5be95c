"""Create verif_code table

Revision ID: a08e3c7d6f70
Revises: 9f7d2b6c5e60
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "a08e3c7d6f70"
down_revision = "9f7d2b6c5e60"
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "verif_code",
        sa.Column("account_id", sa.String(36), nullable=False),
        sa.Column("code", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("account_id"),
    )


def downgrade():
    op.drop_table("verif_code")
