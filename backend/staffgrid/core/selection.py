"""Row Selection — pure transitions over an immutable set of selected ids.

Invariants:
    - NONE mode: toggles and select-all leave the selection unchanged
    - SINGLE mode: a toggle leaves at most one id selected
    - MULTIPLE mode: toggles flip membership per row independently
    - select_page() only ever involves the ids of the current page
    - forget() removes an id in every mode (used when a row is deleted)
    - Changing mode never clamps an existing selection; the next toggle does

Design Decisions:
    - frozenset in, frozenset out: callers swap state atomically, and the
      same functions serve TableState and direct unit tests
"""

from typing import Iterable

from staffgrid.core.domain_types import EmployeeId, SelectionMode

Selection = frozenset[EmployeeId]

EMPTY_SELECTION: Selection = frozenset()


def toggle_row(
    selection: Selection,
    mode: SelectionMode,
    row_id: EmployeeId,
    checked: bool,
) -> Selection:
    """Apply one row checkbox change under the given mode."""
    if mode == SelectionMode.SINGLE:
        return frozenset({row_id}) if checked else EMPTY_SELECTION
    if mode == SelectionMode.MULTIPLE:
        if checked:
            return selection | {row_id}
        return selection - {row_id}
    return selection


def select_page(
    selection: Selection,
    mode: SelectionMode,
    page_ids: Iterable[EmployeeId],
    checked: bool,
) -> Selection:
    """Select-all checkbox: replace the selection with the page's ids, or clear it."""
    if mode != SelectionMode.MULTIPLE:
        return selection
    return frozenset(page_ids) if checked else EMPTY_SELECTION


def forget(selection: Selection, row_id: EmployeeId) -> Selection:
    return selection - {row_id}


def is_page_selected(selection: Selection, page_ids: Iterable[EmployeeId]) -> bool:
    """Select-all checkbox state: page non-empty and every row on it selected."""
    ids = list(page_ids)
    return bool(ids) and all(row_id in selection for row_id in ids)
