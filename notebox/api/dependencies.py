"""Route Dependencies — per-request repositories built from the request's DB session."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from notebox.infrastructure.database import get_db
from notebox.infrastructure.sql_repositories import (
    SqlCategoryRepository, SqlNoteRepository,
)


def get_category_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlCategoryRepository:
    return SqlCategoryRepository(db)


def get_note_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlNoteRepository:
    return SqlNoteRepository(db)
