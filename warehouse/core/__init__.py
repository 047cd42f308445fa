"""Core Layer — entity model, invariants and pure queries. No IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/
    - Aggregation functions are pure and deterministic for a given snapshot

Design Decisions:
    - Functional core separated from imperative shell: persistence reaches the core
      only through repository_protocols.WarehouseRepository
"""
