"""Shelf life resolution — the three-way date rule on its own."""

from datetime import date

import pytest

from warehouse.core.errors import EntityValidationError
from warehouse.core.shelf_life import resolve_expire_date


def test_production_only_defaults_to_100_days():
    assert resolve_expire_date(date(2023, 12, 1), None) == date(2024, 3, 10)


def test_expire_only_returned_as_is():
    assert resolve_expire_date(None, date(2024, 1, 1)) == date(2024, 1, 1)


def test_both_given_returns_expire():
    assert resolve_expire_date(date(2023, 11, 15), date(2024, 2, 20)) == date(2024, 2, 20)


def test_neither_given_rejected():
    with pytest.raises(EntityValidationError) as exc:
        resolve_expire_date(None, None)
    assert exc.value.code == "MISSING_DATES"
    assert exc.value.field == "expire_date"


def test_same_day_rejected():
    with pytest.raises(EntityValidationError) as exc:
        resolve_expire_date(date(2024, 1, 1), date(2024, 1, 1))
    assert exc.value.code == "EXPIRE_NOT_AFTER_PRODUCTION"
