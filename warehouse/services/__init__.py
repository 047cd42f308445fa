"""Services Layer — orchestration of entity mutations, persistence and reports.

Invariants:
    - Mutation + save run under one process-wide lock (single writer)
    - Reports always run the pure aggregation engine on one loaded snapshot

Design Decisions:
    - Services depend on the WarehouseRepository Protocol, not on SQLAlchemy
"""
