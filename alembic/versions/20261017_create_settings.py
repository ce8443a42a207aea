"""create settings table and seed the singleton row

Revision ID: 20261017_settings
Revises:
Create Date: 2026-10-17

The settings table holds exactly one row. It is seeded here; the
application never inserts into it.
"""

import uuid
from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

revision: str = "20261017_settings"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

_TEXT_COLUMNS = (
    "platform_name",
    "platform_description",
    "plataform_logo",
    "plataform_banner",
    "plataform_banner_2",
    "plataform_banner_3",
    "register_banner",
    "login_banner",
    "deposit_banner",
    "pluggou_base_url",
    "pluggou_api_key",
    "pluggou_organization_id",
)


def upgrade() -> None:
    op.create_table(
        "settings",
        sa.Column("id", sa.Uuid(), nullable=False),
        *[sa.Column(name, sa.Text(), nullable=True) for name in _TEXT_COLUMNS],
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    settings = sa.table("settings", sa.column("id", sa.Uuid()))
    op.bulk_insert(settings, [{"id": uuid.uuid4()}])


def downgrade() -> None:
    op.drop_table("settings")
