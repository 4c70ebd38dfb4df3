"""Demo data seeding — one-time, only into an empty categories table.

Invariants:
    - Empty store: creates 3 categories and 1 note in each
    - Any existing category: nothing is created
    - Seeding twice == seeding once
    - Losing a seeding race to another process returns False, no exception
"""

from notebox.core.errors import UniqueConstraintError
from notebox.infrastructure.sql_repositories import (
    SqlCategoryRepository, SqlNoteRepository,
)
from notebox.services.seed_demo_data import DEMO_DATA, seed_demo_data


async def test_seeds_empty_store(test_db):
    categories = SqlCategoryRepository(test_db)
    notes = SqlNoteRepository(test_db)

    assert await seed_demo_data(categories, notes) is True

    seeded = await categories.list_all()
    assert [c.name for c in seeded] == ["PowerShell", "GitHub", "Recipes"]
    assert [c.color for c in seeded] == ["#3B82F6", "#1F2937", "#10B981"]

    all_notes = await notes.list_all()
    assert len(all_notes) == 3
    by_title = {n.title: n for n in all_notes}
    assert by_title["Basic Commands"].is_favorite is True
    assert by_title["Basic Commands"].category_id == seeded[0].id
    assert by_title["Pasta Carbonara"].category_id == seeded[2].id


async def test_seeding_is_idempotent(test_db):
    categories = SqlCategoryRepository(test_db)
    notes = SqlNoteRepository(test_db)

    await seed_demo_data(categories, notes)
    assert await seed_demo_data(categories, notes) is False

    assert len(await categories.list_all()) == len(DEMO_DATA)
    assert len(await notes.list_all()) == 3


async def test_skips_when_user_categories_exist(test_db):
    categories = SqlCategoryRepository(test_db)
    notes = SqlNoteRepository(test_db)
    await categories.create(name="Mine")

    assert await seed_demo_data(categories, notes) is False
    assert [c.name for c in await categories.list_all()] == ["Mine"]
    assert await notes.list_all() == []


async def test_works_against_protocol_fakes():
    created = {"categories": [], "notes": []}

    class _Category:
        def __init__(self, id, name, color):
            self.id, self.name, self.color = id, name, color

    class _FakeCategories:
        async def list_all(self):
            return list(created["categories"])

        async def create(self, name, color=None):
            category = _Category(len(created["categories"]) + 1, name, color)
            created["categories"].append(category)
            return category

    class _FakeNotes:
        async def create(self, title, content, category_id=None, is_favorite=False):
            created["notes"].append((title, category_id))

    assert await seed_demo_data(_FakeCategories(), _FakeNotes()) is True
    assert [cid for _, cid in created["notes"]] == [1, 2, 3]


async def test_concurrent_seeder_winning_the_race_is_not_an_error():
    class _LosingCategories:
        async def list_all(self):
            return []

        async def create(self, name, color=None):
            raise UniqueConstraintError("Category", "name", name)

    class _Notes:
        async def create(self, **fields):
            raise AssertionError("no notes without a category")

    assert await seed_demo_data(_LosingCategories(), _Notes()) is False
