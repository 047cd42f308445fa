"""Dimensions — positivity, volume and footprint fit."""

import pytest

from warehouse.core.dimensions import Dimensions, require_positive
from warehouse.core.errors import EntityValidationError


def test_volume():
    assert Dimensions(2, 3, 4).volume == 24


def test_frozen():
    dims = Dimensions(1, 1, 1)
    with pytest.raises(AttributeError):
        dims.width = 2


def test_fits_footprint_ignores_height():
    pallet = Dimensions(100, 10, 100)
    assert Dimensions(100, 500, 100).fits_footprint(pallet)
    assert not Dimensions(101, 1, 100).fits_footprint(pallet)
    assert not Dimensions(100, 1, 101).fits_footprint(pallet)


@pytest.mark.parametrize("value", [0, -1, True, 1.0, "3", None])
def test_require_positive_rejects(value):
    with pytest.raises(EntityValidationError) as exc:
        require_positive("weight", value)
    assert exc.value.code == "NON_POSITIVE_VALUE"
    assert exc.value.field == "weight"


def test_require_positive_returns_value():
    assert require_positive("width", 7) == 7
