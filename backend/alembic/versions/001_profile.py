"""Profile table — the singleton baby profile row.

Revision ID: 001_profile
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_profile"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "profile",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column("name", sa.String(50), nullable=True),
        sa.Column("birthday", sa.String(10), nullable=True),
        sa.Column("picture_uri", sa.Text, nullable=True),
    )


def downgrade() -> None:
    op.drop_table("profile")
