"""SQL Warehouse Repository — SQLAlchemy implementation of core.WarehouseRepository.

Invariants:
    - Every load runs in a single session, so pallets and boxes come from one
      read-consistent view; placed boxes are re-attached through Pallet.add_box
    - Snapshot order is primary-key order for both pallets and boxes
    - save_pallet leaves storage membership equal to pallet.boxes
    - Inside run_in_transaction all saves share one session and commit once;
      any exception rolls the whole unit back

Design Decisions:
    - Entities rebuilt through their validating constructors: a stored row that
      breaks an entity rule fails the load instead of leaking into reports
    - get-then-assign upserts over session.merge: explicit about which columns
      are written, and the pallet row is flushed before its boxes so the FK holds
    - add_pallet / add_box are plain INSERTs flushed at once: an id clash with a
      stored row surfaces as DatabaseError instead of overwriting it
    - Nested run_in_transaction calls join the outer unit of work
"""

import logging
from contextlib import contextmanager
from operator import attrgetter
from typing import Callable, Iterator, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from warehouse.core.box import Box
from warehouse.core.identity import box_ids, pallet_ids
from warehouse.core.pallet import Pallet
from warehouse.infrastructure.database import DatabaseSessionManager
from warehouse.models.box import BoxRecord
from warehouse.models.pallet import PalletRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _to_pallet(row: PalletRecord) -> Pallet:
    return Pallet(row.width, row.height, row.depth, id=row.id)


def _to_box(row: BoxRecord) -> Box:
    return Box(
        row.width, row.height, row.depth, row.weight,
        row.production_date, row.expire_date, id=row.id,
    )


class SqlWarehouseRepository:
    """Loads and stores pallets and boxes through a DatabaseSessionManager."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager
        self._active: Session | None = None

    @contextmanager
    def _unit(self) -> Iterator[Session]:
        """Join the running unit of work or open and commit a new one."""
        if self._active is not None:
            yield self._active
            return
        with self._manager.session() as session:
            self._active = session
            try:
                yield session
                session.commit()
            finally:
                self._active = None

    # ─── Loads ───────────────────────────────────────────────────

    def _load_snapshot(self, session: Session) -> tuple[list[Pallet], list[Box]]:
        pallets: list[Pallet] = []
        boxes: list[Box] = []
        pallet_rows = session.scalars(
            select(PalletRecord)
            .order_by(PalletRecord.id)
            .execution_options(populate_existing=True),
        ).all()
        for pallet_row in pallet_rows:
            pallet = _to_pallet(pallet_row)
            for box_row in pallet_row.boxes:
                box = _to_box(box_row)
                pallet.add_box(box)
                boxes.append(box)
            pallets.append(pallet)

        loose_rows = session.scalars(
            select(BoxRecord)
            .where(BoxRecord.pallet_id.is_(None))
            .order_by(BoxRecord.id)
            .execution_options(populate_existing=True),
        ).all()
        boxes.extend(_to_box(row) for row in loose_rows)
        boxes.sort(key=attrgetter("id"))
        logger.debug(f"Loaded snapshot: {len(pallets)} pallets, {len(boxes)} boxes")
        return pallets, boxes

    def load_all_pallets(self) -> list[Pallet]:
        with self._unit() as session:
            pallets, _ = self._load_snapshot(session)
        return pallets

    def load_all_boxes(self) -> list[Box]:
        with self._unit() as session:
            _, boxes = self._load_snapshot(session)
        return boxes

    def load_snapshot(self) -> tuple[list[Pallet], list[Box]]:
        """Pallets and boxes from the same read, sharing object identity."""
        with self._unit() as session:
            return self._load_snapshot(session)

    # ─── Saves ───────────────────────────────────────────────────

    def _upsert_pallet(self, session: Session, pallet: Pallet) -> None:
        row = session.get(PalletRecord, pallet.id)
        if row is None:
            row = PalletRecord(id=pallet.id)
            session.add(row)
        row.width = pallet.width
        row.height = pallet.height
        row.depth = pallet.depth
        session.flush()

    def _upsert_box(self, session: Session, box: Box) -> None:
        row = session.get(BoxRecord, box.id)
        if row is None:
            row = BoxRecord(id=box.id)
            session.add(row)
        row.width = box.width
        row.height = box.height
        row.depth = box.depth
        row.weight = box.weight
        row.production_date = box.production_date
        row.expire_date = box.expire_date
        row.pallet_id = box.pallet_id

    def _store_membership(self, session: Session, pallet: Pallet) -> int:
        member_ids = [box.id for box in pallet.boxes]
        for box in pallet.boxes:
            self._upsert_box(session, box)
        stored = session.scalars(
            select(BoxRecord).where(BoxRecord.pallet_id == pallet.id),
        ).all()
        for row in stored:
            if row.id not in member_ids:
                row.pallet_id = None
        return len(member_ids)

    def save_pallet(self, pallet: Pallet) -> None:
        with self._unit() as session:
            self._upsert_pallet(session, pallet)
            count = self._store_membership(session, pallet)
        logger.info(
            f"Saved pallet {pallet.id} with {count} box(es)",
            extra={"pallet_id": pallet.id, "operation": "save_pallet"},
        )

    def save_box(self, box: Box) -> None:
        with self._unit() as session:
            if box.pallet is not None:
                self._upsert_pallet(session, box.pallet)
            self._upsert_box(session, box)
        logger.info(
            f"Saved box {box.id}",
            extra={"box_id": box.id, "pallet_id": box.pallet_id, "operation": "save_box"},
        )

    # ─── Creation ────────────────────────────────────────────────

    def add_pallet(self, pallet: Pallet) -> None:
        """Insert a new pallet; a stored pallet with the same id fails as DatabaseError."""
        with self._unit() as session:
            session.add(PalletRecord(
                id=pallet.id, width=pallet.width,
                height=pallet.height, depth=pallet.depth,
            ))
            session.flush()
            self._store_membership(session, pallet)
        logger.info(
            f"Added pallet {pallet.id}",
            extra={"pallet_id": pallet.id, "operation": "add_pallet"},
        )

    def add_box(self, box: Box) -> None:
        """Insert a new box; a stored box with the same id fails as DatabaseError."""
        with self._unit() as session:
            session.add(BoxRecord(
                id=box.id, width=box.width, height=box.height, depth=box.depth,
                weight=box.weight, production_date=box.production_date,
                expire_date=box.expire_date, pallet_id=box.pallet_id,
            ))
            session.flush()
        logger.info(
            f"Added box {box.id}",
            extra={"box_id": box.id, "pallet_id": box.pallet_id, "operation": "add_box"},
        )

    def run_in_transaction(self, work: Callable[[], T]) -> T:
        """Run `work` as one all-or-nothing unit."""
        with self._unit():
            return work()

    def reserve_stored_identities(self) -> None:
        """Advance the identity sequences past the largest stored ids."""
        with self._unit() as session:
            max_pallet = session.scalar(select(func.max(PalletRecord.id)))
            max_box = session.scalar(select(func.max(BoxRecord.id)))
        if max_pallet:
            pallet_ids.advance_past(max_pallet)
        if max_box:
            box_ids.advance_past(max_box)
