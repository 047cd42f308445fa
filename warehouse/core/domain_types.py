"""Domain Types — identity wrappers and physical constants shared by the entity model.

Invariants:
    - BoxId, PalletId wrap positive ints — never use a bare int as an identity in domain logic
    - Lengths are centimeters, weights grams, volumes cubic centimeters (all ints)
    - NEVER_EXPIRES sorts after every real expiration date

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - date.max as the "never" sentinel: keeps Pallet.expire_date a plain date, so
      sorting and grouping need no Optional handling
"""

from datetime import date
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

BoxId = NewType("BoxId", int)
PalletId = NewType("PalletId", int)


# ─── Physical Constants ──────────────────────────────────────────

PALLET_TARE_WEIGHT_G = 30_000
DEFAULT_SHELF_LIFE_DAYS = 100
NEVER_EXPIRES = date.max


# ─── Unit Conversion ─────────────────────────────────────────────

GRAMS_PER_KG = 1_000
CM3_PER_M3 = 1_000_000
