"""Report Routes — expiration grouping and longest shelf life.

Invariants:
    - Both reports are computed from one snapshot per request
    - The never-expiring group of empty pallets is reported with expire_date null
"""

from fastapi import APIRouter, Depends, Query

from warehouse.api.dependencies import get_inventory_service
from warehouse.core.domain_types import NEVER_EXPIRES
from warehouse.schemas.inventory import (
    ExpirationGroupResponse, PalletResponse, ShelfLifeEntryResponse,
)
from warehouse.services.inventory import InventoryService

router = APIRouter(prefix="/api/v1/reports", tags=["reports"])


@router.get("/expiration-groups", response_model=list[ExpirationGroupResponse])
def expiration_groups(service: InventoryService = Depends(get_inventory_service)):
    return [
        ExpirationGroupResponse(
            expire_date=None if expire_date == NEVER_EXPIRES else expire_date,
            pallets=[PalletResponse.from_entity(p) for p in pallets],
        )
        for expire_date, pallets in service.expiration_report()
    ]


@router.get("/longest-shelf-life", response_model=list[ShelfLifeEntryResponse])
def longest_shelf_life(
    n: int | None = Query(None, ge=0, le=1000),
    service: InventoryService = Depends(get_inventory_service),
):
    return [
        ShelfLifeEntryResponse(
            pallet=PalletResponse.from_entity(p),
            latest_box_expire_date=p.latest_box_expire_date,
        )
        for p in service.shelf_life_report(n)
    ]
