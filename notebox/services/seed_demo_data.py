"""Demo Data Seeding — one-time bootstrap of sample categories and notes.

Invariants:
    - Runs only when the categories table is empty (idempotent across restarts)
    - Every demo note references a demo category created in the same run
    - A concurrent seeder winning the race is not an error: this run stops quietly

Design Decisions:
    - Works against repository Protocols: the lifespan hook supplies SQL repositories,
      tests may supply the same or fakes
"""

import logging

from notebox.core.errors import UniqueConstraintError
from notebox.core.repository_protocols import CategoryRepository, NoteRepository

logger = logging.getLogger(__name__)

# (name, color, [(title, content, is_favorite), ...])
DEMO_DATA: list[tuple[str, str, list[tuple[str, str, bool]]]] = [
    ("PowerShell", "#3B82F6", [
        (
            "Basic Commands",
            "Get-ChildItem - lists files\n"
            "Get-Service - lists services\n"
            "Get-Help - gets help",
            True,
        ),
    ]),
    ("GitHub", "#1F2937", [
        (
            "Git Workflow",
            "git init\ngit add .\ngit commit -m 'Initial commit'\ngit push",
            False,
        ),
    ]),
    ("Recipes", "#10B981", [
        (
            "Pasta Carbonara",
            "Ingredients: Pasta, Eggs, Pecorino Cheese, Guanciale, Black Pepper.",
            False,
        ),
    ]),
]


async def seed_demo_data(
    categories: CategoryRepository, notes: NoteRepository,
) -> bool:
    """Populate demo categories and notes if none exist. Returns True if seeded."""
    if await categories.list_all():
        logger.info("Categories present, skipping demo seed")
        return False
    for name, color, demo_notes in DEMO_DATA:
        try:
            category = await categories.create(name=name, color=color)
        except UniqueConstraintError:
            # Another worker started against the same empty database
            logger.info(f"Demo category {name} already created by another process")
            return False
        for title, content, is_favorite in demo_notes:
            await notes.create(
                title=title, content=content,
                category_id=category.id, is_favorite=is_favorite,
            )
    logger.info(f"Seeded {len(DEMO_DATA)} demo categories")
    return True
