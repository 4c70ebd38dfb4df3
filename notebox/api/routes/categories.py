"""Category Routes — CRUD over /api/categories.

Invariants:
    - Input validated by Pydantic before reaching the handler (400 on failure)
    - Duplicate names -> 409 via UniqueConstraintError
    - GET/PUT on a missing id -> 404; DELETE on a missing id -> 204 (idempotent)
    - Deleting a category never deletes its notes
    - Path ids outside 1..MAX_DB_ID -> 400 before any query runs

Design Decisions:
    - PUT is a patch: only fields present in the body are written
"""

import logging

from fastapi import APIRouter, Depends, Path, Response, status

from notebox.api.dependencies import get_category_repository
from notebox.core.domain_types import CategoryId, MAX_DB_ID
from notebox.core.errors import NotFoundError
from notebox.infrastructure.sql_repositories import SqlCategoryRepository
from notebox.schemas.category import (
    CategoryCreate, CategoryResponse, CategoryUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    repo: SqlCategoryRepository = Depends(get_category_repository),
):
    """All categories, ascending id."""
    return await repo.list_all()


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: int = Path(ge=1, le=MAX_DB_ID),
    repo: SqlCategoryRepository = Depends(get_category_repository),
):
    category = await repo.get(CategoryId(category_id))
    if category is None:
        raise NotFoundError("Category", category_id)
    return category


@router.post(
    "", response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_category(
    body: CategoryCreate,
    repo: SqlCategoryRepository = Depends(get_category_repository),
):
    return await repo.create(name=body.name, color=body.color)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    body: CategoryUpdate,
    category_id: int = Path(ge=1, le=MAX_DB_ID),
    repo: SqlCategoryRepository = Depends(get_category_repository),
):
    """Partial update — fields absent from the body are left untouched."""
    return await repo.update(
        CategoryId(category_id), body.model_dump(exclude_unset=True),
    )


@router.delete(
    "/{category_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_category(
    category_id: int = Path(ge=1, le=MAX_DB_ID),
    repo: SqlCategoryRepository = Depends(get_category_repository),
):
    await repo.delete(CategoryId(category_id))
