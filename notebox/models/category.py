"""Category ORM — a named, color-tagged grouping for notes.

Invariants:
    - id is an auto-incrementing integer primary key
    - name is unique and non-nullable (uniqueness enforced by the store, not the app)
    - color defaults to DEFAULT_CATEGORY_COLOR

Design Decisions:
    - No ORM relationship to Note: deletes are targeted statements, and the
      notes FK is ON DELETE SET NULL at the database level
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from notebox.core.domain_types import DEFAULT_CATEGORY_COLOR
from notebox.db.base import Base


class Category(Base):
    """Category entity."""
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    color: Mapped[str] = mapped_column(
        Text, nullable=False, default=DEFAULT_CATEGORY_COLOR,
        server_default=DEFAULT_CATEGORY_COLOR,
    )
