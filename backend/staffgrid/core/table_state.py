"""Table State — in-memory UI state of the employee table and its derived view.

Invariants:
    - rows is the authoritative copy of the last successful fetch; nothing
      but replace_rows() changes it
    - view() is recomputed from scratch on every call (no cached derivations)
    - The page number is never auto-corrected when the filter shrinks the
      result set; an out-of-range page renders as an empty slice
    - page_size is always one of PAGE_SIZE_OPTIONS
    - The selection survives refetches, search changes and page changes

Design Decisions:
    - Mutable dataclass holding state, pure functions (table_view, sort_cycle,
      selection) deciding transitions: the holder stays trivial to inspect
    - Defaults mirror the original table: salary descending, multiple
      selection, first page of ten
"""

from dataclasses import dataclass, field
from typing import Iterable

from staffgrid.core import selection as sel
from staffgrid.core.domain_types import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT_COLUMN,
    DEFAULT_SORT_DIRECTION,
    PAGE_SIZE_OPTIONS,
    SORTABLE_FIELDS,
    EmployeeId,
    SelectionMode,
    SortDirection,
)
from staffgrid.core.entities import Employee
from staffgrid.core.errors import InvalidTableStateError
from staffgrid.core.format_cells import PageControls, empty_message, page_controls
from staffgrid.core.sort_cycle import next_sort
from staffgrid.core.table_view import derive_page


@dataclass(frozen=True)
class TableView:
    """Everything needed to render one frame of the table."""
    rows: tuple[Employee, ...]
    total_count: int
    total_pages: int
    page: int
    page_size: int
    sort_column: str | None
    sort_direction: SortDirection | None
    selection_mode: SelectionMode
    selected_ids: frozenset[EmployeeId]
    page_selected: bool
    controls: PageControls
    is_empty: bool
    empty_message: str

    @property
    def selected_count(self) -> int:
        return len(self.selected_ids)


@dataclass
class TableState:
    """Per-table UI state — pure dataclass, no IO."""

    rows: tuple[Employee, ...] = ()
    search_term: str = ""
    sort_column: str | None = DEFAULT_SORT_COLUMN
    sort_direction: SortDirection | None = DEFAULT_SORT_DIRECTION
    selection_mode: SelectionMode = SelectionMode.MULTIPLE
    selected_ids: frozenset[EmployeeId] = field(default_factory=frozenset)
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    # === Data ===

    def replace_rows(self, rows: Iterable[Employee]) -> None:
        """Swap in a freshly fetched row set (the old projection is discarded)."""
        self.rows = tuple(rows)

    # === Search & sort ===

    def set_search(self, term: str) -> None:
        self.search_term = term

    def activate_sort(self, column: str) -> None:
        """Header click: advance the asc → desc → unsorted cycle."""
        if column not in SORTABLE_FIELDS:
            raise InvalidTableStateError(
                f"Column '{column}' is not sortable", field="sort_column",
            )
        self.sort_column, self.sort_direction = next_sort(
            self.sort_column, self.sort_direction, column,
        )

    # === Pagination ===

    def set_page_size(self, page_size: int) -> None:
        if page_size not in PAGE_SIZE_OPTIONS:
            raise InvalidTableStateError(
                f"Page size {page_size} not in {PAGE_SIZE_OPTIONS}",
                field="page_size",
            )
        self.page_size = page_size

    def go_to_page(self, page: int) -> None:
        self.page = page

    def next_page(self) -> None:
        self.page = self.view().controls.next_page

    def previous_page(self) -> None:
        self.page = self.view().controls.previous_page

    # === Selection ===

    def set_selection_mode(self, mode: SelectionMode) -> None:
        self.selection_mode = SelectionMode(mode)

    def toggle_row(self, row_id: EmployeeId, checked: bool) -> None:
        self.selected_ids = sel.toggle_row(
            self.selected_ids, self.selection_mode, row_id, checked,
        )

    def toggle_page(self, checked: bool) -> None:
        """Select-all checkbox: acts on the rows of the current page only."""
        page_ids = [row.id for row in self.view().rows]
        self.selected_ids = sel.select_page(
            self.selected_ids, self.selection_mode, page_ids, checked,
        )

    def forget_row(self, row_id: EmployeeId) -> None:
        self.selected_ids = sel.forget(self.selected_ids, row_id)

    # === Derived view ===

    def view(self) -> TableView:
        result = derive_page(
            self.rows, self.search_term, self.sort_column,
            self.sort_direction, self.page, self.page_size,
        )
        page_ids = [row.id for row in result.rows]
        return TableView(
            rows=result.rows,
            total_count=result.total_count,
            total_pages=result.total_pages,
            page=self.page,
            page_size=self.page_size,
            sort_column=self.sort_column,
            sort_direction=self.sort_direction,
            selection_mode=self.selection_mode,
            selected_ids=self.selected_ids,
            page_selected=sel.is_page_selected(self.selected_ids, page_ids),
            controls=page_controls(self.page, result.total_pages),
            is_empty=result.total_count == 0,
            empty_message=empty_message(self.search_term),
        )
