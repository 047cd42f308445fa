"""Initial schema — Pallets and Boxes.

Revision ID: 001_initial
Revises: None
Create Date: 2025-06-11

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "Pallets",
        sa.Column("Id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("Width", sa.Integer, nullable=False),
        sa.Column("Height", sa.Integer, nullable=False),
        sa.Column("Depth", sa.Integer, nullable=False),
    )

    op.create_table(
        "Boxes",
        sa.Column("Id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("ProductionDate", sa.Date, nullable=True),
        sa.Column("ExpireDate", sa.Date, nullable=False),
        sa.Column(
            "PalletId", sa.Integer,
            sa.ForeignKey("Pallets.Id", name="FK_Boxes_Pallets_PalletId", ondelete="RESTRICT"),
            nullable=True,
        ),
        sa.Column("Width", sa.Integer, nullable=False),
        sa.Column("Height", sa.Integer, nullable=False),
        sa.Column("Depth", sa.Integer, nullable=False),
        sa.Column("Weight", sa.Integer, nullable=False),
    )
    op.create_index("IX_Boxes_PalletId", "Boxes", ["PalletId"])


def downgrade() -> None:
    op.drop_index("IX_Boxes_PalletId", table_name="Boxes")
    op.drop_table("Boxes")
    op.drop_table("Pallets")
