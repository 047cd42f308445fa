"""Pallet ORM — persists pallet footprints in the Pallets table.

Invariants:
    - Id is the integer primary key (autoincrement when not supplied)
    - Width/Height/Depth non-nullable integers (centimeters)
    - Weight and volume are derived in the domain and never stored

Design Decisions:
    - No cascade on boxes: Boxes.PalletId is ON DELETE RESTRICT, a pallet with
      boxes cannot be deleted
"""

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from warehouse.db.base import Base


class PalletRecord(Base):
    """Row of the Pallets table."""
    __tablename__ = "Pallets"

    id: Mapped[int] = mapped_column(
        "Id", Integer, primary_key=True, autoincrement=True,
    )
    width: Mapped[int] = mapped_column("Width", Integer, nullable=False)
    height: Mapped[int] = mapped_column("Height", Integer, nullable=False)
    depth: Mapped[int] = mapped_column("Depth", Integer, nullable=False)

    boxes: Mapped[list["BoxRecord"]] = relationship(
        "BoxRecord", back_populates="pallet",
        lazy="selectin", order_by="BoxRecord.id",
    )
