"""Report Formatting — console lines for the expiration and shelf-life reports.

Invariants:
    - Pure string building, no IO; callers print or return the lines
    - Weights shown in kilograms (grams / 1000), volumes in cubic meters (cm³ / 1e6),
      printed at full float precision
    - Dates in ISO form
"""

from datetime import date
from typing import Iterable

from warehouse.core.dimensions import Dimensioned
from warehouse.core.domain_types import CM3_PER_M3, GRAMS_PER_KG
from warehouse.core.pallet import Pallet


def weight_kg(entity: Dimensioned) -> float:
    return entity.weight / GRAMS_PER_KG


def volume_m3(entity: Dimensioned) -> float:
    return entity.volume / CM3_PER_M3


def format_expiration_report(groups: Iterable[tuple[date, list[Pallet]]]) -> list[str]:
    lines = ["Pallets grouped by expiration date (ascending weight within a group):"]
    for expire_date, pallets in groups:
        lines.append(f"Expires on: {expire_date.isoformat()}")
        for pallet in pallets:
            lines.append(
                f"  Pallet {pallet.id}, weight: {weight_kg(pallet)} kg, "
                f"volume: {volume_m3(pallet)} m^3"
            )
    return lines


def format_shelf_life_report(pallets: Iterable[Pallet]) -> list[str]:
    lines = ["Pallets holding the longest-lasting boxes (ascending volume):"]
    for pallet in pallets:
        latest = pallet.latest_box_expire_date
        lines.append(
            f"Pallet {pallet.id}, volume: {volume_m3(pallet)} m^3, "
            f"expires on: {latest.isoformat() if latest else '-'}"
        )
    return lines
