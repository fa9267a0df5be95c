"""Create athlete table

Revision ID: 6c4a9e3f2b30
Revises: 5b2e8d4c1a20
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "6c4a9e3f2b30"
down_revision = "5b2e8d4c1a20"
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "athlete",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("club_id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("dob", sa.Date(), nullable=False),
        sa.Column("phone_number", sa.String(20), nullable=False),
        sa.Column("gender", sa.String(6), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("register_date", sa.Date(), nullable=False),
        sa.Column("active", sa.String(10), nullable=False, server_default="UNKNOWN"),
        sa.ForeignKeyConstraint(["club_id"], ["club.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_athlete_name"), "athlete", ["name"])


def downgrade():
    op.drop_index(op.f("ix_athlete_name"), table_name="athlete")
    op.drop_table("athlete")
