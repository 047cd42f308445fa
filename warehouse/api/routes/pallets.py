"""Pallet Routes — create and list pallets, place and remove boxes.

Invariants:
    - Placement errors surface as 409 (StateError) through the global handler
    - Removing a box that is not on the pallet returns the unchanged pallet (200)
"""

import logging

from fastapi import APIRouter, Depends, status

from warehouse.api.dependencies import get_inventory_service
from warehouse.schemas.inventory import PalletCreate, PalletResponse
from warehouse.services.inventory import InventoryService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/pallets", tags=["pallets"])


@router.post(
    "", response_model=PalletResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_pallet(
    body: PalletCreate, service: InventoryService = Depends(get_inventory_service),
):
    pallet = service.create_pallet(body.width, body.height, body.depth)
    return PalletResponse.from_entity(pallet)


@router.get("", response_model=list[PalletResponse])
def list_pallets(service: InventoryService = Depends(get_inventory_service)):
    return [PalletResponse.from_entity(p) for p in service.list_pallets()]


@router.post("/{pallet_id}/boxes/{box_id}", response_model=PalletResponse)
def place_box(
    pallet_id: int, box_id: int,
    service: InventoryService = Depends(get_inventory_service),
):
    """Put a box on a pallet."""
    return PalletResponse.from_entity(service.place_box(pallet_id, box_id))


@router.delete("/{pallet_id}/boxes/{box_id}", response_model=PalletResponse)
def remove_box(
    pallet_id: int, box_id: int,
    service: InventoryService = Depends(get_inventory_service),
):
    """Take a box off a pallet."""
    return PalletResponse.from_entity(service.unplace_box(pallet_id, box_id))
