"""Box ORM — persists boxes and their pallet membership in the Boxes table.

Invariants:
    - ExpireDate always stored (already resolved by the domain constructor)
    - PalletId nullable FK → Pallets.Id, ON DELETE RESTRICT, indexed as IX_Boxes_PalletId

Design Decisions:
    - Column names match the established schema (PascalCase) via explicit names;
      Python attributes stay snake_case
"""

from datetime import date

from sqlalchemy import Date, ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from warehouse.db.base import Base


class BoxRecord(Base):
    """Row of the Boxes table."""
    __tablename__ = "Boxes"
    __table_args__ = (Index("IX_Boxes_PalletId", "PalletId"),)

    id: Mapped[int] = mapped_column(
        "Id", Integer, primary_key=True, autoincrement=True,
    )
    production_date: Mapped[date | None] = mapped_column(
        "ProductionDate", Date, nullable=True,
    )
    expire_date: Mapped[date] = mapped_column("ExpireDate", Date, nullable=False)
    pallet_id: Mapped[int | None] = mapped_column(
        "PalletId", Integer,
        ForeignKey("Pallets.Id", name="FK_Boxes_Pallets_PalletId", ondelete="RESTRICT"),
        nullable=True,
    )
    width: Mapped[int] = mapped_column("Width", Integer, nullable=False)
    height: Mapped[int] = mapped_column("Height", Integer, nullable=False)
    depth: Mapped[int] = mapped_column("Depth", Integer, nullable=False)
    weight: Mapped[int] = mapped_column("Weight", Integer, nullable=False)

    pallet: Mapped["PalletRecord | None"] = relationship(
        "PalletRecord", back_populates="boxes",
    )
