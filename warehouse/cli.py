"""Warehouse CLI — create the schema, seed demo data and print the two reports.

Usage:
    warehouse init-db
    warehouse seed
    warehouse report [--top N]

Invariants:
    - WarehouseError is caught here (the boundary), logged, and turned into exit code 1
    - Settings come from the environment; --database-url overrides DATABASE_URL
"""

import argparse
import logging
import sys

from warehouse.config import get_settings
from warehouse.core.errors import WarehouseError
from warehouse.infrastructure.database import DatabaseSessionManager, init_db
from warehouse.infrastructure.observability import setup_logging
from warehouse.infrastructure.sql_repository import SqlWarehouseRepository
from warehouse.reporting import format_expiration_report, format_shelf_life_report
from warehouse.services.inventory import InventoryService
from warehouse.services.seed import reset_schema, seed_demo_inventory

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="warehouse", description=__doc__.splitlines()[0])
    parser.add_argument("--database-url", help="overrides DATABASE_URL")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("init-db", help="create missing tables")
    sub.add_parser("seed", help="drop all data and load the demo inventory")
    report = sub.add_parser("report", help="print expiration and shelf-life reports")
    report.add_argument("--top", type=int, default=None, help="pallets in the shelf-life report")
    return parser


def _run(args: argparse.Namespace, manager: DatabaseSessionManager) -> None:
    repository = SqlWarehouseRepository(manager)
    if args.command == "init-db":
        manager.create_schema()
        return
    if args.command == "seed":
        reset_schema(manager)
        seed_demo_inventory(repository)
        return

    manager.create_schema()
    service = InventoryService(repository, default_top_n=get_settings().report_top_n)
    lines = format_expiration_report(service.expiration_report())
    lines.append("")
    lines.extend(format_shelf_life_report(service.shelf_life_report(args.top)))
    print("\n".join(lines))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level, "text")
    manager = init_db(
        args.database_url or settings.database_url, echo=settings.database_echo,
    )
    try:
        _run(args, manager)
    except WarehouseError as e:
        logger.error(
            f"{args.command} failed: {e.message}",
            extra={"error_code": e.code}, exc_info=e.__cause__ is not None,
        )
        return 1
    finally:
        manager.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
