"""Report formatting — unit conversion and line layout."""

from datetime import date

from warehouse.core.aggregation import group_pallets_by_expiration
from warehouse.core.box import Box
from warehouse.core.pallet import Pallet
from warehouse.reporting import (
    format_expiration_report, format_shelf_life_report, volume_m3, weight_kg,
)


def _pallet(*expire_dates) -> Pallet:
    pallet = Pallet(100, 100, 100)
    for expire in expire_dates:
        pallet.add_box(Box(10, 10, 10, 500, None, expire))
    return pallet


def test_unit_conversion():
    pallet = _pallet(date(2024, 1, 1))
    assert weight_kg(pallet) == 30.5
    assert volume_m3(pallet) == 1.001


def test_expiration_report_lines():
    pallet = _pallet(date(2024, 1, 1))
    lines = format_expiration_report(group_pallets_by_expiration([pallet]))
    assert lines == [
        "Pallets grouped by expiration date (ascending weight within a group):",
        "Expires on: 2024-01-01",
        f"  Pallet {pallet.id}, weight: 30.5 kg, volume: 1.001 m^3",
    ]


def test_shelf_life_report_lines():
    pallet = _pallet(date(2024, 1, 1), date(2024, 5, 1))
    empty = Pallet(100, 100, 100)
    lines = format_shelf_life_report([pallet, empty])
    assert lines[1] == f"Pallet {pallet.id}, volume: 1.002 m^3, expires on: 2024-05-01"
    assert lines[2] == f"Pallet {empty.id}, volume: 1.0 m^3, expires on: -"


def test_volume_keeps_every_digit():
    pallet = Pallet(100, 100, 100)
    pallet.add_box(Box(1, 234_567, 1, 1, None, date(2024, 1, 1)))
    assert pallet.volume == 1_234_567
    [_, line] = format_shelf_life_report([pallet])
    assert line == f"Pallet {pallet.id}, volume: 1.234567 m^3, expires on: 2024-01-01"


def test_empty_reports_keep_header():
    assert len(format_expiration_report([])) == 1
    assert len(format_shelf_life_report([])) == 1
