"""Inventory Schemas — Pydantic models for pallets, boxes and reports at the API boundary.

Invariants:
    - Dimensions and weight must be positive integers (Field(gt=0))
    - Date rules (at least one date, expire after production) stay in the domain
      constructor; its EntityValidationError reaches the client as a 400
    - Response models are built from domain entities via from_entity()

Design Decisions:
    - from_entity classmethods over from_attributes: derived values (volume,
      expire_date, weight) are domain properties, read explicitly
"""

from datetime import date

from pydantic import BaseModel, Field

from warehouse.core.box import Box
from warehouse.core.domain_types import NEVER_EXPIRES
from warehouse.core.pallet import Pallet


class PalletCreate(BaseModel):
    """Pallet creation — footprint in centimeters."""
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    depth: int = Field(gt=0)


class BoxCreate(BaseModel):
    """Box creation — dimensions in centimeters, weight in grams."""
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    depth: int = Field(gt=0)
    weight: int = Field(gt=0)
    production_date: date | None = None
    expire_date: date | None = None


class BoxResponse(BaseModel):
    id: int
    width: int
    height: int
    depth: int
    weight: int
    volume: int
    production_date: date | None
    expire_date: date
    pallet_id: int | None

    @classmethod
    def from_entity(cls, box: Box) -> "BoxResponse":
        return cls(
            id=box.id, width=box.width, height=box.height, depth=box.depth,
            weight=box.weight, volume=box.volume,
            production_date=box.production_date, expire_date=box.expire_date,
            pallet_id=box.pallet_id,
        )


class PalletResponse(BaseModel):
    id: int
    width: int
    height: int
    depth: int
    weight: int
    volume: int
    expire_date: date | None = Field(
        description="Earliest box expiration; null for an empty pallet",
    )
    box_ids: list[int]

    @classmethod
    def from_entity(cls, pallet: Pallet) -> "PalletResponse":
        expire_date = pallet.expire_date
        return cls(
            id=pallet.id, width=pallet.width, height=pallet.height,
            depth=pallet.depth, weight=pallet.weight, volume=pallet.volume,
            expire_date=None if expire_date == NEVER_EXPIRES else expire_date,
            box_ids=[b.id for b in pallet.boxes],
        )


class ExpirationGroupResponse(BaseModel):
    expire_date: date | None
    pallets: list[PalletResponse]


class ShelfLifeEntryResponse(BaseModel):
    pallet: PalletResponse
    latest_box_expire_date: date
