"""Note Routes — CRUD over /api/notes with optional category filter.

Invariants:
    - ?categoryId= is coerced to int; empty or 0 means no filter; non-numeric -> 400
    - Path ids outside 1..MAX_DB_ID -> 400 before any query runs
    - List order is createdAt ascending
    - createdAt is set on create and never changes on PUT
    - GET/PUT on a missing id -> 404; DELETE on a missing id -> 204 (idempotent)
"""

import logging

from fastapi import APIRouter, Depends, Path, Query, Response, status

from notebox.api.dependencies import get_note_repository
from notebox.core.domain_types import CategoryId, NoteId, MAX_DB_ID
from notebox.core.errors import NotFoundError
from notebox.core.validation import parse_category_filter
from notebox.infrastructure.sql_repositories import SqlNoteRepository
from notebox.schemas.note import NoteCreate, NoteResponse, NoteUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/notes", tags=["notes"])


@router.get("", response_model=list[NoteResponse])
async def list_notes(
    category_id: str | None = Query(None, alias="categoryId"),
    repo: SqlNoteRepository = Depends(get_note_repository),
):
    """All notes, or only those in one category. Empty or 0 means all."""
    category_filter = parse_category_filter(category_id)
    return await repo.list_all(
        CategoryId(category_filter) if category_filter is not None else None,
    )


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: int = Path(ge=1, le=MAX_DB_ID),
    repo: SqlNoteRepository = Depends(get_note_repository),
):
    note = await repo.get(NoteId(note_id))
    if note is None:
        raise NotFoundError("Note", note_id)
    return note


@router.post(
    "", response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_note(
    body: NoteCreate,
    repo: SqlNoteRepository = Depends(get_note_repository),
):
    return await repo.create(
        title=body.title,
        content=body.content,
        category_id=body.category_id,
        is_favorite=body.is_favorite,
    )


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    body: NoteUpdate,
    note_id: int = Path(ge=1, le=MAX_DB_ID),
    repo: SqlNoteRepository = Depends(get_note_repository),
):
    """Partial update — fields absent from the body are left untouched."""
    return await repo.update(NoteId(note_id), body.model_dump(exclude_unset=True))


@router.delete(
    "/{note_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_note(
    note_id: int = Path(ge=1, le=MAX_DB_ID),
    repo: SqlNoteRepository = Depends(get_note_repository),
):
    await repo.delete(NoteId(note_id))
