"""SQL Repositories — category and note persistence over an AsyncSession.

Invariants:
    - Every write is one statement followed by commit (no multi-statement transactions)
    - Updates are targeted: UPDATE ... SET <changed fields> WHERE id = :id
    - Category name collisions surface as UniqueConstraintError, detected from the
      store's unique constraint so concurrent duplicates also fail
    - Note.created_at is never part of an update
    - Delete never checks existence first; the return value says whether a row went away
    - A non-null note category_id must reference an existing category on create/update

Design Decisions:
    - Repository per aggregate, built per request from the request's session
      (ADR: explicit handle instead of an ambient store singleton)
    - IntegrityError caught here, not in the session manager: only the repository
      knows which constraint a statement can violate
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from notebox.core.domain_types import CategoryId, NoteId, DEFAULT_CATEGORY_COLOR
from notebox.core.errors import NotFoundError, UniqueConstraintError, ValidationError
from notebox.models.category import Category
from notebox.models.note import Note

logger = logging.getLogger(__name__)

_CATEGORY_PATCHABLE = frozenset({"name", "color"})
_NOTE_PATCHABLE = frozenset({"title", "content", "category_id", "is_favorite"})


def _check_patchable(changes: dict, allowed: frozenset) -> None:
    for key in changes:
        if key not in allowed:
            raise ValidationError(f"{key} cannot be updated", key)


class SqlCategoryRepository:
    """Category persistence — satisfies core.repository_protocols.CategoryRepository."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[Category]:
        result = await self.db.execute(select(Category).order_by(Category.id))
        return list(result.scalars().all())

    async def get(self, category_id: CategoryId) -> Category | None:
        return await self.db.get(Category, category_id)

    async def create(self, name: str, color: str | None = None) -> Category:
        """Insert a category; color falls back to the default."""
        category = Category(name=name, color=color or DEFAULT_CATEGORY_COLOR)
        self.db.add(category)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise UniqueConstraintError("Category", "name", name)
        await self.db.refresh(category)
        logger.info(
            f"Category created: {category.name}",
            extra={"category_id": category.id},
        )
        return category

    async def update(
        self, category_id: CategoryId, changes: dict[str, object],
    ) -> Category:
        """Apply a patch. Empty patch returns the stored record unchanged."""
        _check_patchable(changes, _CATEGORY_PATCHABLE)
        if changes:
            try:
                result = await self.db.execute(
                    update(Category)
                    .where(Category.id == category_id)
                    .values(**changes),
                )
                await self.db.commit()
            except IntegrityError:
                await self.db.rollback()
                raise UniqueConstraintError("Category", "name", str(changes.get("name")))
            if result.rowcount == 0:
                raise NotFoundError("Category", category_id)
            logger.info(
                f"Category updated: {sorted(changes)}",
                extra={"category_id": category_id},
            )
        category = await self.db.get(Category, category_id, populate_existing=True)
        if category is None:
            raise NotFoundError("Category", category_id)
        return category

    async def delete(self, category_id: CategoryId) -> bool:
        """Delete a category. Its notes stay; their category_id becomes NULL."""
        result = await self.db.execute(
            delete(Category).where(Category.id == category_id),
        )
        await self.db.commit()
        removed = result.rowcount > 0
        if removed:
            logger.info("Category deleted", extra={"category_id": category_id})
        else:
            logger.info(
                "Category delete for missing id (no-op)",
                extra={"category_id": category_id},
            )
        return removed


class SqlNoteRepository:
    """Note persistence — satisfies core.repository_protocols.NoteRepository."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self, category_id: CategoryId | None = None) -> list[Note]:
        """All notes, or one category's notes, oldest first."""
        query = select(Note).order_by(Note.created_at, Note.id)
        if category_id is not None:
            query = query.where(Note.category_id == category_id)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get(self, note_id: NoteId) -> Note | None:
        return await self.db.get(Note, note_id)

    async def create(
        self,
        title: str,
        content: str,
        category_id: CategoryId | None = None,
        is_favorite: bool = False,
    ) -> Note:
        if category_id is not None:
            await self._require_category(category_id)
        note = Note(
            title=title, content=content,
            category_id=category_id, is_favorite=is_favorite,
        )
        self.db.add(note)
        await self.db.commit()
        await self.db.refresh(note)
        logger.info(f"Note created: {note.title}", extra={"note_id": note.id})
        return note

    async def update(self, note_id: NoteId, changes: dict[str, object]) -> Note:
        """Apply a patch. created_at is not patchable."""
        _check_patchable(changes, _NOTE_PATCHABLE)
        if changes.get("category_id") is not None:
            await self._require_category(changes["category_id"])
        if changes:
            result = await self.db.execute(
                update(Note).where(Note.id == note_id).values(**changes),
            )
            await self.db.commit()
            if result.rowcount == 0:
                raise NotFoundError("Note", note_id)
            logger.info(
                f"Note updated: {sorted(changes)}", extra={"note_id": note_id},
            )
        note = await self.db.get(Note, note_id, populate_existing=True)
        if note is None:
            raise NotFoundError("Note", note_id)
        return note

    async def delete(self, note_id: NoteId) -> bool:
        result = await self.db.execute(delete(Note).where(Note.id == note_id))
        await self.db.commit()
        removed = result.rowcount > 0
        if removed:
            logger.info("Note deleted", extra={"note_id": note_id})
        else:
            logger.info("Note delete for missing id (no-op)", extra={"note_id": note_id})
        return removed

    async def _require_category(self, category_id: CategoryId) -> None:
        if await self.db.get(Category, category_id) is None:
            raise ValidationError(
                f"Category {category_id} does not exist", "categoryId",
            )
