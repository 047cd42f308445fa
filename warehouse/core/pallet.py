"""Pallet — aggregate entity owning an ordered collection of boxes.

Invariants:
    - width, height, depth > 0 (footprint of the empty pallet)
    - boxes: unique by identity, insertion order preserved, mutated only via add_box/remove_box
    - expire_date == min(box.expire_date) or NEVER_EXPIRES when empty
    - volume == own volume + sum(box.volume)
    - weight == PALLET_TARE_WEIGHT_G + sum(box.weight)
    - A failed add_box leaves both the pallet and the box unchanged

Design Decisions:
    - add_box checks run in a fixed order (fit → other owner → duplicate) so the
      raised error is deterministic for any combination of violations
    - Height is not checked against the pallet: boxes stack, only the footprint matters
    - Derived attributes recomputed on access: collections are small and this keeps
      no cached state to invalidate
"""

import logging
from datetime import date

from warehouse.core.box import Box
from warehouse.core.clock import Clock, system_clock
from warehouse.core.dimensions import Dimensions
from warehouse.core.domain_types import NEVER_EXPIRES, PALLET_TARE_WEIGHT_G, PalletId
from warehouse.core.errors import BoxOnAnotherPalletError, BoxTooLargeError, DuplicateBoxError
from warehouse.core.identity import pallet_ids

logger = logging.getLogger(__name__)


class Pallet:
    """A pallet and the boxes placed on it."""

    def __init__(self, width: int, height: int, depth: int, *, id: int | None = None):
        self._dimensions = Dimensions(width, height, depth)
        self._id = PalletId(pallet_ids.claim(id))
        self._boxes: list[Box] = []

    def __repr__(self) -> str:
        return (
            f"Pallet(id={self._id}, {self.width}x{self.height}x{self.depth}, "
            f"boxes={[b.id for b in self._boxes]})"
        )

    @property
    def id(self) -> PalletId:
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
    def boxes(self) -> tuple[Box, ...]:
        return tuple(self._boxes)

    @property
    def expire_date(self) -> date:
        if not self._boxes:
            return NEVER_EXPIRES
        return min(b.expire_date for b in self._boxes)

    @property
    def latest_box_expire_date(self) -> date | None:
        """Expiration of the longest-lasting box, None when empty."""
        if not self._boxes:
            return None
        return max(b.expire_date for b in self._boxes)

    @property
    def volume(self) -> int:
        return self._dimensions.volume + sum(b.volume for b in self._boxes)

    @property
    def weight(self) -> int:
        return PALLET_TARE_WEIGHT_G + sum(b.weight for b in self._boxes)

    def contains(self, box: Box) -> bool:
        return any(b is box for b in self._boxes)

    def add_box(self, box: Box) -> None:
        """Place `box` on this pallet or raise a StateError without changing anything."""
        if not box.dimensions.fits_footprint(self._dimensions):
            raise BoxTooLargeError(box.id, self._id)
        if box.pallet is not None and box.pallet is not self:
            raise BoxOnAnotherPalletError(box.id, box.pallet_id, self._id)
        if self.contains(box):
            raise DuplicateBoxError(box.id, self._id)

        box._assign_to_pallet(self)
        self._boxes.append(box)
        logger.debug(
            f"Pallet {self._id} now holds {len(self._boxes)} box(es)",
            extra={"box_id": box.id, "pallet_id": self._id},
        )

    def remove_box(self, box: Box) -> bool:
        """Take `box` off this pallet. Returns False (and does nothing) if absent."""
        for index, candidate in enumerate(self._boxes):
            if candidate is box:
                del self._boxes[index]
                box._remove_from_pallet()
                logger.debug(
                    f"Box {box.id} removed from pallet {self._id}",
                    extra={"box_id": box.id, "pallet_id": self._id},
                )
                return True
        return False

    def is_expired(self, clock: Clock = system_clock) -> bool:
        # NOTE: same comparison direction as Box.is_expired.
        return self.expire_date > clock()
