"""Database Layer — SQLAlchemy declarative Base shared by all ORM models.

Invariants:
    - Single Base per process; Base.metadata drives create_all and Alembic autogenerate
"""
