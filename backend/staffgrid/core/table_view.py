"""Table View Pipeline — raw rows → filtered → sorted → one page. Pure, no IO.

Invariants:
    - derive_page() is a pure function of its arguments (no hidden state)
    - Empty search term matches every row
    - Unsorted (direction None) keeps the filtered order untouched
    - Sorting is stable: equal keys keep their relative order in both directions
    - Values of unhandled or mixed types compare equal
    - Out-of-range pages yield an empty slice; the page number is never corrected

Design Decisions:
    - Comparator negation for descending (not reverse=True) so ties keep the
      filtered order in both directions
    - Locale-aware string order approximated with Unicode decomposition:
      accents and case are ignored at the first level, case breaks ties
      lowercase-first
"""

import math
import unicodedata
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Sequence

from staffgrid.core.domain_types import SEARCHABLE_FIELDS, SortDirection
from staffgrid.core.entities import Employee


@dataclass(frozen=True)
class PageResult:
    """One derived page plus the counts the footer needs."""
    rows: tuple[Employee, ...]
    matching: tuple[Employee, ...]
    total_count: int
    total_pages: int
    page: int
    page_size: int


# ─── Filter ──────────────────────────────────────────────────────

def matches_search(row: Employee, search_term: str) -> bool:
    """True iff the case-folded term occurs in any searchable field."""
    needle = search_term.casefold()
    if not needle:
        return True
    for name in SEARCHABLE_FIELDS:
        value = getattr(row, name, None)
        if isinstance(value, str) and needle in value.casefold():
            return True
    return False


def filter_rows(rows: Sequence[Employee], search_term: str) -> list[Employee]:
    return [row for row in rows if matches_search(row, search_term)]


# ─── Sort ────────────────────────────────────────────────────────

def _strip_accents(value: str) -> str:
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def locale_compare(a: str, b: str) -> int:
    """Three-way string comparison ignoring accents and case at first level."""
    primary_a = _strip_accents(a).casefold()
    primary_b = _strip_accents(b).casefold()
    if primary_a != primary_b:
        return -1 if primary_a < primary_b else 1
    # lowercase sorts before uppercase on ties
    tie_a, tie_b = a.swapcase(), b.swapcase()
    if tie_a != tie_b:
        return -1 if tie_a < tie_b else 1
    return 0


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def compare_values(a: Any, b: Any) -> float:
    """Compare two cell values. Strings by locale, numbers by subtraction, else 0."""
    if isinstance(a, str) and isinstance(b, str):
        return locale_compare(a, b)
    if _is_number(a) and _is_number(b):
        return a - b
    return 0


def sort_rows(
    rows: Sequence[Employee],
    sort_column: str | None,
    sort_direction: SortDirection | None,
) -> list[Employee]:
    """Stable sort by column; returns a copy in the original order when unsorted."""
    if not sort_column or sort_direction is None:
        return list(rows)
    sign = 1 if sort_direction == SortDirection.ASC else -1

    def _compare(left: Employee, right: Employee) -> float:
        result = compare_values(
            getattr(left, sort_column, None), getattr(right, sort_column, None),
        )
        return sign * result

    return sorted(rows, key=cmp_to_key(_compare))


# ─── Paginate ────────────────────────────────────────────────────

def count_pages(total_count: int, page_size: int) -> int:
    return math.ceil(total_count / page_size)


def paginate(
    rows: Sequence[Employee], page: int, page_size: int,
) -> list[Employee]:
    """Slice rows for a 1-indexed page. Pages outside the range are empty."""
    if page < 1:
        return []
    start = (page - 1) * page_size
    return list(rows[start:start + page_size])


# ─── Pipeline ────────────────────────────────────────────────────

def derive_rows(
    rows: Sequence[Employee],
    search_term: str,
    sort_column: str | None,
    sort_direction: SortDirection | None,
) -> list[Employee]:
    """Filter then sort. The full matching sequence every page is cut from."""
    return sort_rows(filter_rows(rows, search_term), sort_column, sort_direction)


def derive_page(
    rows: Sequence[Employee],
    search_term: str,
    sort_column: str | None,
    sort_direction: SortDirection | None,
    page: int,
    page_size: int,
) -> PageResult:
    """Derive the displayed page from raw rows and table state. Pure."""
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    matching = derive_rows(rows, search_term, sort_column, sort_direction)
    return PageResult(
        rows=tuple(paginate(matching, page, page_size)),
        matching=tuple(matching),
        total_count=len(matching),
        total_pages=count_pages(len(matching), page_size),
        page=page,
        page_size=page_size,
    )
