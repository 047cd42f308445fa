"""Inventory Service — create entities, move boxes on and off pallets, build reports.

Invariants:
    - Every mutation and its save run inside _write_lock and one repository transaction
    - A failed mutation persists nothing (the transaction rolls back)
    - Creation reserves stored ids before allocating one and inserts only, so a
      process whose identity sequences lag storage never overwrites a stored row
    - Reports never mutate the snapshot they read

Design Decisions:
    - One coarse module-level lock rather than per-entity locks: the entity
      methods assume a single writer, and warehouse traffic is small
    - Lookups go through the gateway load operations only; a box that is not on
      any pallet is found with load_all_boxes inside the same transaction
"""

import logging
import threading
from datetime import date

from warehouse.core.aggregation import (
    DEFAULT_TOP_N, group_pallets_by_expiration, top_n_longest_shelf_life,
)
from warehouse.core.box import Box
from warehouse.core.errors import ResourceNotFoundError
from warehouse.core.pallet import Pallet
from warehouse.core.repository_protocols import WarehouseRepository

logger = logging.getLogger(__name__)

_write_lock = threading.Lock()


class InventoryService:
    """Entry point for every warehouse use case above the entity model."""

    def __init__(self, repository: WarehouseRepository, default_top_n: int = DEFAULT_TOP_N):
        self.repository = repository
        self.default_top_n = default_top_n

    # ─── Mutations ───────────────────────────────────────────────

    def create_pallet(self, width: int, height: int, depth: int) -> Pallet:
        def work() -> Pallet:
            self.repository.reserve_stored_identities()
            pallet = Pallet(width, height, depth)
            self.repository.add_pallet(pallet)
            return pallet

        with _write_lock:
            pallet = self.repository.run_in_transaction(work)
        logger.info(f"Created pallet {pallet.id}", extra={"pallet_id": pallet.id})
        return pallet

    def create_box(
        self,
        width: int,
        height: int,
        depth: int,
        weight: int,
        production_date: date | None = None,
        expire_date: date | None = None,
    ) -> Box:
        def work() -> Box:
            self.repository.reserve_stored_identities()
            box = Box(width, height, depth, weight, production_date, expire_date)
            self.repository.add_box(box)
            return box

        with _write_lock:
            box = self.repository.run_in_transaction(work)
        logger.info(f"Created box {box.id}", extra={"box_id": box.id})
        return box

    def place_box(self, pallet_id: int, box_id: int) -> Pallet:
        """Put box `box_id` on pallet `pallet_id` and persist the new membership."""
        def work() -> Pallet:
            pallets = self.repository.load_all_pallets()
            pallet = _find_pallet(pallets, pallet_id)
            box = _find_placed_box(pallets, box_id) or _find_box(
                self.repository.load_all_boxes(), box_id,
            )
            pallet.add_box(box)
            self.repository.save_pallet(pallet)
            return pallet

        with _write_lock:
            pallet = self.repository.run_in_transaction(work)
        logger.info(
            f"Placed box {box_id} on pallet {pallet_id}",
            extra={"box_id": box_id, "pallet_id": pallet_id},
        )
        return pallet

    def unplace_box(self, pallet_id: int, box_id: int) -> Pallet:
        """Take box `box_id` off pallet `pallet_id`. No-op if it is not there."""
        def work() -> Pallet:
            pallets = self.repository.load_all_pallets()
            pallet = _find_pallet(pallets, pallet_id)
            box = next((b for b in pallet.boxes if b.id == box_id), None)
            if box is None:
                _find_box(self.repository.load_all_boxes(), box_id)
                return pallet
            pallet.remove_box(box)
            self.repository.save_pallet(pallet)
            return pallet

        with _write_lock:
            return self.repository.run_in_transaction(work)

    # ─── Queries ─────────────────────────────────────────────────

    def list_pallets(self) -> list[Pallet]:
        return self.repository.load_all_pallets()

    def list_boxes(self) -> list[Box]:
        return self.repository.load_all_boxes()

    def expiration_report(self) -> list[tuple[date, list[Pallet]]]:
        return list(group_pallets_by_expiration(self.repository.load_all_pallets()))

    def shelf_life_report(self, n: int | None = None) -> list[Pallet]:
        limit = self.default_top_n if n is None else n
        return top_n_longest_shelf_life(self.repository.load_all_pallets(), limit)


def _find_pallet(pallets: list[Pallet], pallet_id: int) -> Pallet:
    for pallet in pallets:
        if pallet.id == pallet_id:
            return pallet
    raise ResourceNotFoundError("Pallet", pallet_id)


def _find_placed_box(pallets: list[Pallet], box_id: int) -> Box | None:
    for pallet in pallets:
        for box in pallet.boxes:
            if box.id == box_id:
                return box
    return None


def _find_box(boxes: list[Box], box_id: int) -> Box:
    for box in boxes:
        if box.id == box_id:
            return box
    raise ResourceNotFoundError("Box", box_id)
