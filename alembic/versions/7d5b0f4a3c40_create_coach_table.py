"""Create coach table

Revision ID: 7d5b0f4a3c40
Revises: 6c4a9e3f2b30
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "7d5b0f4a3c40"
down_revision = "6c4a9e3f2b30"
branch_labels = None
depends_on = None


def upgrade():
    # dob is free text for coaches
    op.create_table(
        "coach",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("dob", sa.String(255), nullable=False),
        sa.Column("phone_number", sa.String(20), nullable=False),
        sa.Column("gender", sa.String(6), nullable=False, server_default=""),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("discipline", sa.String(255), nullable=False),
        sa.Column("register_date", sa.Date(), nullable=False),
        sa.Column("active", sa.String(10), nullable=False, server_default="UNKNOWN"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_coach_name"), "coach", ["name"])


def downgrade():
    op.drop_index(op.f("ix_coach_name"), table_name="coach")
    op.drop_table("coach")
