"""Infrastructure Layer — storage engine, change notifications, and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All SQLAlchemy failures mapped to DatabaseError at the session boundary
"""
