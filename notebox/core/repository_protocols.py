"""Boundary Protocols — contracts between core and the persistence shell.

Invariants:
    - Core NEVER imports from infrastructure — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by the shell via dependency injection
    - Patches are dicts of snake_case column attributes holding ONLY the changed fields

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - CategoryLike/NoteLike describe records without coupling callers to the ORM
"""

from datetime import datetime
from typing import Protocol

from notebox.core.domain_types import CategoryId, NoteId


class CategoryLike(Protocol):
    """Structural contract for a stored category."""
    id: int
    name: str
    color: str


class NoteLike(Protocol):
    """Structural contract for a stored note."""
    id: int
    title: str
    content: str
    category_id: int | None
    created_at: datetime
    is_favorite: bool


class CategoryRepository(Protocol):
    """Contract for category persistence — implemented by shell."""
    async def list_all(self) -> list[CategoryLike]: ...
    async def get(self, category_id: CategoryId) -> CategoryLike | None: ...
    async def create(self, name: str, color: str | None = None) -> CategoryLike: ...
    async def update(
        self, category_id: CategoryId, changes: dict[str, object],
    ) -> CategoryLike: ...
    async def delete(self, category_id: CategoryId) -> bool: ...


class NoteRepository(Protocol):
    """Contract for note persistence — implemented by shell."""
    async def list_all(self, category_id: CategoryId | None = None) -> list[NoteLike]: ...
    async def get(self, note_id: NoteId) -> NoteLike | None: ...
    async def create(
        self,
        title: str,
        content: str,
        category_id: CategoryId | None = None,
        is_favorite: bool = False,
    ) -> NoteLike: ...
    async def update(self, note_id: NoteId, changes: dict[str, object]) -> NoteLike: ...
    async def delete(self, note_id: NoteId) -> bool: ...
