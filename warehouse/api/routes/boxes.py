"""Box Routes — create and list boxes."""

from fastapi import APIRouter, Depends, status

from warehouse.api.dependencies import get_inventory_service
from warehouse.schemas.inventory import BoxCreate, BoxResponse
from warehouse.services.inventory import InventoryService

router = APIRouter(prefix="/api/v1/boxes", tags=["boxes"])


@router.post(
    "", response_model=BoxResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_box(
    body: BoxCreate, service: InventoryService = Depends(get_inventory_service),
):
    box = service.create_box(
        body.width, body.height, body.depth, body.weight,
        body.production_date, body.expire_date,
    )
    return BoxResponse.from_entity(box)


@router.get("", response_model=list[BoxResponse])
def list_boxes(service: InventoryService = Depends(get_inventory_service)):
    return [BoxResponse.from_entity(b) for b in service.list_boxes()]
