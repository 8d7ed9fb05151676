"""create user_info

Revision ID: 4f1c2a9d7b3e
Revises:
Create Date: 2026-10-17 10:12:40.118305

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4f1c2a9d7b3e'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    op.create_table(
        "user_info",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("visited_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("ip_address", sa.String(length=64)),
        sa.Column("user_agent", sa.Text()),
        sa.Column("language", sa.String(length=64)),
        sa.Column("screen_size", sa.String(length=32)),
        sa.Column("timezone", sa.String(length=64)),
        sa.Column("platform", sa.String(length=64)),
        sa.Column("browser", sa.String(length=64)),
        sa.Column("browser_version", sa.String(length=64)),
        sa.Column("referrer", sa.Text()),
        sa.Column("location", sa.String(length=255)),
        sa.Column("country", sa.String(length=64)),
        sa.Column("city", sa.String(length=128)),
        sa.Column("device", sa.String(length=32)),
        sa.Column("os_name", sa.String(length=64)),
        sa.Column("os_version", sa.String(length=64)),
        sa.Column("webgl_renderer", sa.String(length=255)),
        sa.Column("cpu_cores", sa.Integer()),
        sa.Column("ram", sa.String(length=32)),
        sa.Column("cookies_enabled", sa.Boolean()),
        sa.Column("local_storage_available", sa.Boolean()),
        sa.Column("session_storage_available", sa.Boolean()),
        sa.Column("connection_type", sa.String(length=32)),
        sa.Column("battery_level", sa.Float()),
        sa.Column("battery_charging", sa.Boolean()),
        sa.Column("orientation", sa.String(length=64)),
        sa.Column("touch_screen", sa.Boolean()),
        sa.Column("cookies", sa.JSON()),
        sa.Column("additional_data", sa.JSON()),
    )
    op.create_index("ix_user_info_visited_at", "user_info", ["visited_at"], unique=False)


def downgrade():
    op.drop_index("ix_user_info_visited_at", table_name="user_info")
    op.drop_table("user_info")
