"""Route Dependencies — wires InventoryService to the SQL gateway for FastAPI.

Invariants:
    - Requires init_db() to have run (API lifespan); otherwise RuntimeError
"""

from warehouse.config import get_settings
from warehouse.infrastructure.database import get_db_manager
from warehouse.infrastructure.sql_repository import SqlWarehouseRepository
from warehouse.services.inventory import InventoryService


def get_inventory_service() -> InventoryService:
    """FastAPI dependency: one service per request over the shared session manager."""
    return InventoryService(
        SqlWarehouseRepository(get_db_manager()),
        default_top_n=get_settings().report_top_n,
    )
