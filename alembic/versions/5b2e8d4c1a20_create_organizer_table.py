"""Create organizer table

Revision ID: 5b2e8d4c1a20
Revises: 3a1f0c2b7d10
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "5b2e8d4c1a20"
down_revision = "3a1f0c2b7d10"
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "organizer",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("club_id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("position", sa.String(255), nullable=False),
        sa.Column("register_date", sa.Date(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, server_default=""),
        sa.Column("phone_number", sa.String(20), nullable=False),
        sa.Column("active", sa.String(10), nullable=False, server_default="UNKNOWN"),
        sa.ForeignKeyConstraint(["club_id"], ["club.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_organizer_name"), "organizer", ["name"])


def downgrade():
    op.drop_index(op.f("ix_organizer_name"), table_name="organizer")
    op.drop_table("organizer")
