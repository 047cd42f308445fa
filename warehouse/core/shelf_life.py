"""Shelf Life — resolves a box's effective expiration date from its optional dates.

Invariants:
    - Both dates absent → EntityValidationError(MISSING_DATES)
    - Production only → production + DEFAULT_SHELF_LIFE_DAYS
    - Expire only → expire unchanged
    - Both given → expire must be strictly after production

Design Decisions:
    - One explicit function instead of branching inside Box.__init__: the rule is
      tested on its own and the constructor stays a sequence of checks
"""

from datetime import date, timedelta

from warehouse.core.domain_types import DEFAULT_SHELF_LIFE_DAYS
from warehouse.core.errors import EntityValidationError


def resolve_expire_date(production_date: date | None, expire_date: date | None) -> date:
    """Return the effective expiration date or raise EntityValidationError."""
    if production_date is None and expire_date is None:
        raise EntityValidationError(
            "At least one of production date or expiration date must be given",
            "MISSING_DATES", "expire_date",
        )
    if expire_date is None:
        return production_date + timedelta(days=DEFAULT_SHELF_LIFE_DAYS)
    if production_date is not None and expire_date <= production_date:
        raise EntityValidationError(
            f"Expiration date {expire_date.isoformat()} must be after "
            f"production date {production_date.isoformat()}",
            "EXPIRE_NOT_AFTER_PRODUCTION", "expire_date",
        )
    return expire_date
