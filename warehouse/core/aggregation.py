"""Aggregation Engine — reporting queries over a loaded snapshot of pallets.

Invariants:
    - Inputs are never mutated; no IO
    - group_pallets_by_expiration: groups in ascending expire_date, pallets inside a
      group in ascending weight, ties on (expire_date, weight) keep snapshot order
    - top_n_longest_shelf_life: only pallets with boxes; the n latest expire_dates,
      returned in ascending volume

Design Decisions:
    - sorted() is stable, including with reverse=True, so snapshot order is the
      tie-break everywhere without an explicit index key
    - Cutoff ties in top_n (more pallets share the last selected expire_date than
      slots remain) go to the pallet met first in the snapshot. This is a chosen
      policy, not something the data dictates
    - Grouping sorts the snapshot when called and hands back a lazy generator over
      the sorted copy, so changing the source list afterwards does not change the groups
"""

from datetime import date
from itertools import groupby
from operator import attrgetter
from typing import Iterable, Iterator

from warehouse.core.errors import EntityValidationError
from warehouse.core.pallet import Pallet

DEFAULT_TOP_N = 3


def group_pallets_by_expiration(
    pallets: Iterable[Pallet],
) -> Iterator[tuple[date, list[Pallet]]]:
    """(expire_date, pallets) groups, dates ascending, weight ascending within."""
    ordered = sorted(pallets, key=lambda p: (p.expire_date, p.weight))
    return (
        (expire_date, list(group))
        for expire_date, group in groupby(ordered, key=attrgetter("expire_date"))
    )


def top_n_longest_shelf_life(
    pallets: Iterable[Pallet], n: int = DEFAULT_TOP_N,
) -> list[Pallet]:
    """The n non-empty pallets expiring last, ordered by ascending volume."""
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise EntityValidationError(
            f"n must be a non-negative integer, got {n!r}", "INVALID_LIMIT", "n",
        )
    loaded = [p for p in pallets if p.boxes]
    longest = sorted(loaded, key=attrgetter("expire_date"), reverse=True)[:n]
    return sorted(longest, key=attrgetter("volume"))
