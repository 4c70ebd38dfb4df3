"""Domain Types — identity types and defaults shared across layers.

Invariants:
    - CategoryId, NoteId wrap ints — database-assigned, never client-chosen
    - DEFAULT_CATEGORY_COLOR is the single source for the color default
      (schemas, ORM model and migration all read it)
    - HEX_COLOR_PATTERN accepts #rgb and #rrggbb, either case
    - MAX_DB_ID bounds every id taken from a request

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CategoryId = NewType("CategoryId", int)
NoteId = NewType("NoteId", int)


# ─── Defaults ────────────────────────────────────────────────────

DEFAULT_CATEGORY_COLOR = "#000000"
HEX_COLOR_PATTERN = r"^#(?:[0-9a-fA-F]{3}){1,2}$"

# Integer id columns are 32-bit signed
MAX_DB_ID = 2**31 - 1
