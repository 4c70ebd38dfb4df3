"""ORM Models — SQLAlchemy declarative models for categories and notes.

Invariants:
    - All models inherit from Base (db/base.py)
    - categories 1—N notes through notes.category_id (nullable)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or Alembic autogenerate runs
"""

from notebox.models.category import Category  # noqa: F401
from notebox.models.note import Note  # noqa: F401
