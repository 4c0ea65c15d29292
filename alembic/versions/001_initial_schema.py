"""Initial schema — geo_data table.

Revision ID: 001
Revises: None
Create Date: 2026-10-18
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "geo_data",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("lat", sa.Float, nullable=False),
        sa.Column("lng", sa.Float, nullable=False),
        sa.Column("city", sa.String(200), nullable=True),
        sa.Column("county_name", sa.String(200), nullable=True),
        sa.Column("state_name", sa.String(100), nullable=True),
        sa.Column("state_id", sa.String(10), nullable=True),
        sa.Column("zip", sa.Integer, nullable=False),
    )
    op.create_index("idx_geo_data_zip", "geo_data", ["zip"])
    op.create_index("idx_geo_data_state_id", "geo_data", ["state_id"])
    op.create_index("idx_geo_data_city", "geo_data", ["city"])


def downgrade() -> None:
    op.drop_index("idx_geo_data_city", table_name="geo_data")
    op.drop_index("idx_geo_data_state_id", table_name="geo_data")
    op.drop_index("idx_geo_data_zip", table_name="geo_data")
    op.drop_table("geo_data")
