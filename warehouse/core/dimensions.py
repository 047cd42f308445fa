"""Dimensions — shared physical shape of boxes and pallets.

Invariants:
    - width, height, depth are positive ints (centimeters), immutable after creation
    - volume == width * height * depth (cubic centimeters)
    - Footprint fit compares width and depth only; height is unconstrained

Design Decisions:
    - Frozen dataclass embedded by value in Box and Pallet instead of a common base
      class: entities share the fields without sharing mutation rules
    - Dimensioned Protocol: reporting code treats Box and Pallet uniformly through
      structural typing, no inheritance needed
"""

from dataclasses import dataclass
from typing import Protocol

from warehouse.core.errors import EntityValidationError


def require_positive(name: str, value: object) -> int:
    """Return `value` if it is a positive int, else raise EntityValidationError."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise EntityValidationError(
            f"{name} must be an integer, got {type(value).__name__}",
            "NON_POSITIVE_VALUE", name,
        )
    if value <= 0:
        raise EntityValidationError(
            f"{name} must be greater than zero, got {value}",
            "NON_POSITIVE_VALUE", name,
        )
    return value


@dataclass(frozen=True)
class Dimensions:
    """Width/height/depth triple in centimeters."""
    width: int
    height: int
    depth: int

    def __post_init__(self) -> None:
        require_positive("width", self.width)
        require_positive("height", self.height)
        require_positive("depth", self.depth)

    @property
    def volume(self) -> int:
        return self.width * self.height * self.depth

    def fits_footprint(self, other: "Dimensions") -> bool:
        """True if `self` fits within the width x depth base of `other`."""
        return self.width <= other.width and self.depth <= other.depth


class Dimensioned(Protocol):
    """Structural contract for any physical object with a shape, weight and volume."""

    @property
    def id(self) -> int: ...

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    @property
    def depth(self) -> int: ...

    @property
    def weight(self) -> int: ...

    @property
    def volume(self) -> int: ...
