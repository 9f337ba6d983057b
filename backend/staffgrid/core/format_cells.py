"""Cell & Footer Formatting — display strings and pagination controls for the table.

Invariants:
    - Unknown statuses fall back to their raw value as label
    - avatar_url() always returns a usable URL (generated initials avatar when unset)
    - page_buttons() lists at most MAX_PAGE_BUTTONS leading pages, then the
      last page separately when there are more
"""

from dataclasses import dataclass
from urllib.parse import quote

from staffgrid.core.domain_types import MAX_PAGE_BUTTONS, EmployeeStatus
from staffgrid.core.entities import Employee

STATUS_LABELS: dict[str, str] = {
    EmployeeStatus.ACTIVE.value: "Active",
    EmployeeStatus.ON_LEAVE.value: "On Leave",
    EmployeeStatus.INACTIVE.value: "Inactive",
}

AVATAR_FALLBACK_URL = (
    "https://ui-avatars.com/api/?name={name}&background=1976D2&color=fff"
)

EMPTY_SEARCH_MESSAGE = "No employees match your search criteria."
EMPTY_TABLE_MESSAGE = "Get started by adding your first employee to the system."


def status_label(status: EmployeeStatus | str) -> str:
    value = status.value if isinstance(status, EmployeeStatus) else status
    return STATUS_LABELS.get(value, value)


def avatar_url(employee: Employee) -> str:
    if employee.avatar:
        return employee.avatar
    return AVATAR_FALLBACK_URL.format(name=quote(employee.name, safe=""))


def format_salary(salary: int | float) -> str:
    """95000 -> '$95,000'."""
    return f"${salary:,}"


def empty_message(search_term: str) -> str:
    return EMPTY_SEARCH_MESSAGE if search_term else EMPTY_TABLE_MESSAGE


@dataclass(frozen=True)
class PageControls:
    """Footer navigation state."""
    buttons: tuple[int, ...]
    last_page: int | None
    previous_page: int
    next_page: int
    has_previous: bool
    has_next: bool


def page_buttons(total_pages: int) -> tuple[tuple[int, ...], int | None]:
    """Leading page numbers plus the trailing last page (None when not needed)."""
    leading = tuple(range(1, min(total_pages, MAX_PAGE_BUTTONS) + 1))
    last = total_pages if total_pages > MAX_PAGE_BUTTONS else None
    return leading, last


def page_controls(page: int, total_pages: int) -> PageControls:
    """Previous/next targets clamp into [1, total_pages]; the current page is not."""
    buttons, last = page_buttons(total_pages)
    return PageControls(
        buttons=buttons,
        last_page=last,
        previous_page=max(page - 1, 1),
        next_page=max(min(page + 1, total_pages), 1),
        has_previous=page != 1,
        has_next=total_pages > 0 and page != total_pages,
    )
