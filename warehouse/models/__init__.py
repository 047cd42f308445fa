"""ORM Records — SQLAlchemy declarative mapping of the Pallets and Boxes tables.

Invariants:
    - All records inherit from Base (db/base.py)
    - Records are storage rows only; domain rules live in core.box / core.pallet

Design Decisions:
    - One file per table for locality
    - All records imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from warehouse.models.pallet import PalletRecord  # noqa: F401
from warehouse.models.box import BoxRecord  # noqa: F401
