"""Create club table

Revision ID: 3a1f0c2b7d10
Revises:
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "3a1f0c2b7d10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "club",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("country", sa.String(255), nullable=False),
        sa.Column("province", sa.String(255), nullable=False),
        sa.Column("district", sa.String(255), nullable=False),
        sa.Column("establish_date", sa.Date(), nullable=False),
        sa.Column("logo", sa.String(255), nullable=False),
        sa.Column("address", sa.Text(), nullable=False),
        sa.Column("email_pic", sa.String(255), nullable=False),
        sa.Column("pic", sa.String(255), nullable=False),
        sa.Column("discipline", sa.String(255), nullable=False),
        sa.Column("phone_number", sa.String(20), nullable=False),
        sa.Column("active", sa.String(10), nullable=False, server_default="UNKNOWN"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_club_name"), "club", ["name"])


def downgrade():
    op.drop_index(op.f("ix_club_name"), table_name="club")
    op.drop_table("club")
