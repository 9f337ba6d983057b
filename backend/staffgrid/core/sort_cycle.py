"""Sort Header Cycle — three-state toggle bound to repeated header activation.

Invariants:
    - Same column: None → ASC → DESC → None → ...
    - Different column: always ASC on the new column, whatever the old state
    - The column is kept when the direction returns to None, so the header
      keeps its identity and the next activation starts at ASC again
"""

from staffgrid.core.domain_types import SortDirection

_NEXT_DIRECTION: dict[SortDirection | None, SortDirection | None] = {
    None: SortDirection.ASC,
    SortDirection.ASC: SortDirection.DESC,
    SortDirection.DESC: None,
}


def next_sort(
    current_column: str | None,
    current_direction: SortDirection | None,
    activated_column: str,
) -> tuple[str, SortDirection | None]:
    """Return the (column, direction) after a header activation."""
    if activated_column != current_column:
        return activated_column, SortDirection.ASC
    return activated_column, _NEXT_DIRECTION[current_direction]
