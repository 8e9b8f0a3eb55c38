"""Delete an account's users when the account is deleted.

Revision ID: 20250722092822
Revises: 20250722092010
Create Date: 2025-07-22

"""
from typing import Sequence, Union

from alembic import op

revision: str = "20250722092822"
down_revision: Union[str, None] = "20250722092010"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.drop_constraint("users_owner_id_fkey", "users", type_="foreignkey")
    op.create_foreign_key(
        "users_owner_id_fkey",
        "users",
        "auth_users",
        ["owner_id"],
        ["id"],
        ondelete="CASCADE",
        onupdate="CASCADE",
    )


def downgrade() -> None:
    op.drop_constraint("users_owner_id_fkey", "users", type_="foreignkey")
    op.create_foreign_key(
        "users_owner_id_fkey",
        "users",
        "auth_users",
        ["owner_id"],
        ["id"],
        ondelete="RESTRICT",
        onupdate="CASCADE",
    )
