"""Boundary Protocols — persistence contract between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - A loaded snapshot is internally consistent: every box's pallet is in the same snapshot
    - Writes inside run_in_transaction are all-or-nothing
    - save_* overwrite the stored row with the same id; add_* never do

Design Decisions:
    - Protocol over ABC: structural subtyping, the SQL gateway and test doubles
      need no shared base class
    - Synchronous: every call blocks; callers serialize mutation themselves
"""

from typing import Callable, Protocol, TypeVar

from warehouse.core.box import Box
from warehouse.core.pallet import Pallet

T = TypeVar("T")


class WarehouseRepository(Protocol):
    """Contract for pallet and box persistence — implemented by shell."""
    def load_all_pallets(self) -> list[Pallet]: ...
    def load_all_boxes(self) -> list[Box]: ...
    def save_box(self, box: Box) -> None: ...
    def save_pallet(self, pallet: Pallet) -> None: ...
    def run_in_transaction(self, work: Callable[[], T]) -> T: ...
    # Creation: insert-only, an id already in storage is an error
    def add_box(self, box: Box) -> None: ...
    def add_pallet(self, pallet: Pallet) -> None: ...
    def reserve_stored_identities(self) -> None: ...
