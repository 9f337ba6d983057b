"""Domain Types — identifiers, enums and table constants shared across layers.

Invariants:
    - EmployeeId and UserId are opaque strings (uuid4 hex for created rows,
      short numeric strings for seeded rows)
    - All valid states encoded as Enums, no raw string matching
    - PAGE_SIZE_OPTIONS is the closed set of page sizes the table accepts

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", str)
UserId = NewType("UserId", str)


# ─── Enums ───────────────────────────────────────────────────────

class EmployeeStatus(str, Enum):
    """Employment status shown as a badge in the table."""
    ACTIVE = "active"
    ON_LEAVE = "on-leave"
    INACTIVE = "inactive"


class SortDirection(str, Enum):
    """Active sort direction. Unsorted is represented by None."""
    ASC = "asc"
    DESC = "desc"


class SelectionMode(str, Enum):
    """How many rows may be selected at once."""
    SINGLE = "single"
    MULTIPLE = "multiple"
    NONE = "none"


# ─── Table Constants ─────────────────────────────────────────────

PAGE_SIZE_OPTIONS: tuple[int, ...] = (10, 25, 50, 100)
DEFAULT_PAGE_SIZE = 10

# Columns the search box matches against
SEARCHABLE_FIELDS: tuple[str, ...] = ("name", "email", "department", "role")

# Columns with a clickable header
SORTABLE_FIELDS: tuple[str, ...] = (
    "name", "email", "department", "role", "salary",
)

DEFAULT_SORT_COLUMN = "salary"
DEFAULT_SORT_DIRECTION = SortDirection.DESC

# Page buttons rendered before the "..." + last-page button
MAX_PAGE_BUTTONS = 5
