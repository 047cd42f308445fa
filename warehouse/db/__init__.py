"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - Single synchronous engine per process (initialized via init_db)

Design Decisions:
    - Synchronous Session: every persistence call blocks and the core has no async code
"""
