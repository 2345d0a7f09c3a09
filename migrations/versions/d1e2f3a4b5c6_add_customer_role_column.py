"""add role column to customer

Revision ID: d1e2f3a4b5c6
Revises: c0a1b2c3d4e5
Create Date: 2026-10-05

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = "d1e2f3a4b5c6"
down_revision: Union[str, Sequence[str], None] = "c0a1b2c3d4e5"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ROLE_VALUES = ("USER", "ADMIN", "MANAGER")

# Postgres only: lets plain varchar parameters be assigned to the enum column.
ROLE_CAST_FUNCTION = """
CREATE OR REPLACE FUNCTION role_cast(varchar) RETURNS role AS $$
    SELECT CASE $1
        WHEN 'USER' THEN 'USER'::role
        WHEN 'ADMIN' THEN 'ADMIN'::role
        WHEN 'MANAGER' THEN 'MANAGER'::role
    END;
$$ LANGUAGE SQL;
"""

ROLE_CAST = """
DO $$
BEGIN
    IF NOT EXISTS (
        SELECT 1
        FROM pg_cast c
        JOIN pg_type src ON c.castsource = src.oid
        JOIN pg_type dst ON c.casttarget = dst.oid
        WHERE src.typname = 'varchar' AND dst.typname = 'role'
    ) THEN
        CREATE CAST (varchar AS role) WITH FUNCTION role_cast(varchar) AS ASSIGNMENT;
    END IF;
END
$$;
"""


def upgrade() -> None:
    bind = op.get_bind()
    insp = inspect(bind)

    role_enum = sa.Enum(*ROLE_VALUES, name="role")
    # CREATE TYPE on Postgres; no-op on backends without native enums.
    role_enum.create(bind, checkfirst=True)

    cols = {c["name"] for c in insp.get_columns("customer")}
    if "role" not in cols:
        op.add_column(
            "customer",
            sa.Column("role", role_enum, nullable=False, server_default="USER"),
        )

    if bind.dialect.name == "postgresql":
        op.execute(ROLE_CAST_FUNCTION)
        op.execute(ROLE_CAST)


def downgrade() -> None:
    bind = op.get_bind()
    if bind.dialect.name == "postgresql":
        op.execute("DROP CAST IF EXISTS (varchar AS role)")
        op.execute("DROP FUNCTION IF EXISTS role_cast(varchar)")

    with op.batch_alter_table("customer") as batch_op:
        batch_op.drop_column("role")

    sa.Enum(*ROLE_VALUES, name="role").drop(bind, checkfirst=True)
