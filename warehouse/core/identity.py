"""Identity Sequences — assign entity identities at construction time.

Invariants:
    - next_id() returns strictly increasing positive ints
    - After advance_past(n), every later next_id() is greater than n
    - Non-positive identities are rejected with EntityValidationError

Design Decisions:
    - Identity assigned on creation (not by the database): a Box can point at its
      Pallet's id before either is persisted, so pallet_id is never null while
      the pallet reference is set
    - Restoring a stored entity with an explicit id advances the sequence, which keeps
      fresh ids clear of persisted ones without a DB round-trip
"""

from warehouse.core.errors import EntityValidationError


class IdentitySequence:
    """Monotonic identity source for one entity kind."""

    def __init__(self, name: str, start: int = 1):
        self.name = name
        self._next = start

    def next_id(self) -> int:
        value = self._next
        self._next += 1
        return value

    def advance_past(self, used_id: int) -> None:
        """Record that `used_id` is taken."""
        if isinstance(used_id, bool) or not isinstance(used_id, int) or used_id <= 0:
            raise EntityValidationError(
                f"{self.name} id must be a positive integer, got {used_id!r}",
                "INVALID_IDENTITY", "id",
            )
        if used_id >= self._next:
            self._next = used_id + 1

    def claim(self, requested: int | None) -> int:
        """Return `requested` (marking it used) or a fresh id when None."""
        if requested is None:
            return self.next_id()
        self.advance_past(requested)
        return requested


box_ids = IdentitySequence("Box")
pallet_ids = IdentitySequence("Pallet")
