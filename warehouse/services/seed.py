"""Demo Seeding — fills an empty warehouse with the reference inventory.

Invariants:
    - All 20 boxes, 12 pallets and their placements are written in ONE transaction
    - Any failure (entity rule or database) rolls the whole seed back and re-raises

Design Decisions:
    - Data kept as plain tuples: the rows read like the inventory sheet they came from
    - Boxes are inserted before placement so loose boxes exist even if a pallet stays empty
    - Rows are inserted, never upserted: seeding over existing ids fails instead of
      overwriting stored inventory
"""

import logging
from datetime import date

from warehouse.core.box import Box
from warehouse.core.pallet import Pallet
from warehouse.core.repository_protocols import WarehouseRepository
from warehouse.infrastructure.database import DatabaseSessionManager

logger = logging.getLogger(__name__)

# (width, height, depth, weight_g, production_date, expire_date)
DEMO_BOXES: tuple[tuple[int, int, int, int, date | None, date | None], ...] = (
    (10, 50, 20, 100, date(2023, 11, 15), None),
    (10, 50, 20, 100, None, date(2024, 1, 1)),
    (100, 50, 20, 100, date(2023, 11, 15), date(2024, 2, 20)),
    (80, 40, 20, 200, date(2023, 12, 1), None),
    (80, 40, 20, 4000, date(2023, 12, 1), None),
    (80, 40, 20, 200, date(2023, 12, 1), None),
    (12, 60, 30, 500, date(2023, 10, 10), date(2024, 3, 15)),
    (150, 70, 40, 800, None, date(2024, 4, 1)),
    (90, 90, 90, 1200, date(2023, 12, 25), None),
    (70, 50, 30, 600, date(2023, 11, 30), date(2024, 1, 15)),
    (10, 10, 50, 1500, date(2023, 12, 10), None),
    (60, 40, 20, 300, date(2023, 12, 5), date(2024, 2, 28)),
    (50, 50, 50, 700, None, date(2024, 3, 10)),
    (80, 60, 40, 1000, date(2023, 11, 20), None),
    (120, 80, 60, 2000, date(2023, 12, 15), date(2024, 4, 5)),
    (70, 70, 70, 900, date(2023, 12, 20), None),
    (90, 50, 30, 400, date(2023, 11, 25), date(2024, 1, 31)),
    (110, 60, 40, 800, None, date(2023, 12, 5)),
    (100, 80, 50, 1200, date(2023, 12, 5), None),
    (60, 60, 60, 600, date(2023, 12, 18), date(2024, 3, 20)),
)

# (width, height, depth)
DEMO_PALLETS: tuple[tuple[int, int, int], ...] = (
    (100, 100, 100),
    (100, 100, 100),
    (120, 120, 120),
    (120, 120, 120),
    (150, 150, 150),
    (120, 120, 120),
    (100, 100, 100),
    (120, 120, 120),
    (150, 150, 150),
    (100, 100, 100),
    (120, 120, 120),
    (150, 150, 150),
)

# pallet index -> box indexes, in placement order
DEMO_PLACEMENTS: dict[int, tuple[int, ...]] = {
    0: (4, 5),
    1: (2,),
    2: (3,),
    3: (0, 1),
    4: (6, 7),
    5: (8,),
    6: (9, 10),
    7: (11, 12),
    8: (13, 14),
    9: (15,),
    10: (16, 17),
    11: (18, 19),
}


def seed_demo_inventory(repository: WarehouseRepository) -> list[Pallet]:
    """Write the reference inventory in one transaction and return its pallets."""
    def work() -> list[Pallet]:
        repository.reserve_stored_identities()
        boxes = [Box(*row) for row in DEMO_BOXES]
        for box in boxes:
            repository.add_box(box)

        pallets = [Pallet(*row) for row in DEMO_PALLETS]
        for pallet_index, box_indexes in DEMO_PLACEMENTS.items():
            pallet = pallets[pallet_index]
            for box_index in box_indexes:
                pallet.add_box(boxes[box_index])
        for pallet in pallets:
            repository.add_pallet(pallet)
        return pallets

    try:
        pallets = repository.run_in_transaction(work)
    except Exception as e:
        logger.error(f"Seeding failed, transaction rolled back: {e}", exc_info=True)
        raise
    logger.info(f"Seeded {len(DEMO_BOXES)} boxes on {len(DEMO_PALLETS)} pallets")
    return pallets


def reset_schema(manager: DatabaseSessionManager) -> None:
    """Drop and recreate all tables."""
    manager.drop_schema()
    manager.create_schema()
