"""create customer table

Revision ID: c0a1b2c3d4e5
Revises:
Create Date: 2026-09-28

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = "c0a1b2c3d4e5"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    insp = inspect(op.get_bind())
    if insp.has_table("customer"):
        return

    op.create_table(
        "customer",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("gender", sa.String(16), nullable=False),
        sa.Column("age", sa.Integer(), nullable=False),
        sa.UniqueConstraint("email", name="customer_email_unique"),
    )


def downgrade() -> None:
    op.drop_table("customer")
