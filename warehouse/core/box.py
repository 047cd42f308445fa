"""Box — leaf entity with dimensions, weight, shelf-life dates and optional pallet membership.

Invariants:
    - width, height, depth, weight > 0; checked before any date rule
    - expire_date always set (see shelf_life.resolve_expire_date)
    - pallet_id is None <=> pallet is None (pallet_id is derived from the reference)
    - Membership changes only through Pallet.add_box / Pallet.remove_box

Design Decisions:
    - Dimensions embedded by value; dimensional fields exposed read-only
    - _assign_to_pallet/_remove_from_pallet are package-private: Pallet is the single
      entry point, so the two sides of the relationship cannot drift apart
    - Identity-based equality: two boxes with equal measurements are still two boxes
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from warehouse.core.clock import Clock, system_clock
from warehouse.core.dimensions import Dimensions, require_positive
from warehouse.core.domain_types import BoxId, PalletId
from warehouse.core.errors import BoxOnAnotherPalletError
from warehouse.core.identity import box_ids
from warehouse.core.shelf_life import resolve_expire_date

if TYPE_CHECKING:
    from warehouse.core.pallet import Pallet

logger = logging.getLogger(__name__)


class Box:
    """A box that may sit on at most one pallet."""

    def __init__(
        self,
        width: int,
        height: int,
        depth: int,
        weight: int,
        production_date: date | None = None,
        expire_date: date | None = None,
        *,
        id: int | None = None,
    ):
        self._dimensions = Dimensions(width, height, depth)
        self._weight = require_positive("weight", weight)
        self._expire_date = resolve_expire_date(production_date, expire_date)
        self._production_date = production_date
        self._id = BoxId(box_ids.claim(id))
        self._pallet: Pallet | None = None

    def __repr__(self) -> str:
        return (
            f"Box(id={self._id}, {self.width}x{self.height}x{self.depth}, "
            f"weight={self._weight}, expire_date={self._expire_date.isoformat()}, "
            f"pallet_id={self.pallet_id})"
        )

    @property
    def id(self) -> BoxId:
        return self._id

    @property
    def dimensions(self) -> Dimensions:
        return self._dimensions

    @property
    def width(self) -> int:
        return self._dimensions.width

    @property
    def height(self) -> int:
        return self._dimensions.height

    @property
    def depth(self) -> int:
        return self._dimensions.depth

    @property
    def weight(self) -> int:
        return self._weight

    @property
    def volume(self) -> int:
        return self._dimensions.volume

    @property
    def production_date(self) -> date | None:
        return self._production_date

    @property
    def expire_date(self) -> date:
        return self._expire_date

    @property
    def pallet(self) -> Pallet | None:
        return self._pallet

    @property
    def pallet_id(self) -> PalletId | None:
        return self._pallet.id if self._pallet is not None else None

    def is_expired(self, clock: Clock = system_clock) -> bool:
        # NOTE: true while expire_date is still ahead of today. This is the stored
        # comparison direction and reports depend on it; do not flip it here.
        return self._expire_date > clock()

    def _assign_to_pallet(self, pallet: Pallet) -> None:
        """Attach to `pallet`. Called by Pallet.add_box only."""
        if self._pallet is not None and self._pallet is not pallet:
            raise BoxOnAnotherPalletError(self._id, self._pallet.id, pallet.id)
        self._pallet = pallet
        logger.debug(
            f"Box {self._id} assigned to pallet {pallet.id}",
            extra={"box_id": self._id, "pallet_id": pallet.id},
        )

    def _remove_from_pallet(self) -> None:
        """Detach unconditionally. Called by Pallet.remove_box only."""
        self._pallet = None
