"""Infrastructure Layer — database access, SQL gateway and cross-cutting concerns.

Invariants:
    - All driver failures surface as core.errors.DatabaseError with the cause chained

Design Decisions:
    - The SQL gateway is the only module that converts between ORM records and
      domain entities
"""
