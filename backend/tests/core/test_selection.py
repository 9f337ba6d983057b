"""Tests for row selection transitions under each SelectionMode."""

from staffgrid.core.domain_types import SelectionMode
from staffgrid.core.selection import (
    EMPTY_SELECTION,
    forget,
    is_page_selected,
    select_page,
    toggle_row,
)


def test_single_mode_replaces_previous_selection():
    selection = toggle_row(EMPTY_SELECTION, SelectionMode.SINGLE, "A", True)
    selection = toggle_row(selection, SelectionMode.SINGLE, "B", True)
    assert selection == {"B"}


def test_single_mode_uncheck_clears():
    selection = frozenset({"A"})
    assert toggle_row(selection, SelectionMode.SINGLE, "A", False) == set()


def test_single_mode_shrinks_an_oversized_selection_on_next_toggle():
    selection = frozenset({"A", "B", "C"})
    assert toggle_row(selection, SelectionMode.SINGLE, "D", True) == {"D"}


def test_multiple_mode_toggles_independently():
    selection = toggle_row(EMPTY_SELECTION, SelectionMode.MULTIPLE, "A", True)
    selection = toggle_row(selection, SelectionMode.MULTIPLE, "B", True)
    assert selection == {"A", "B"}
    selection = toggle_row(selection, SelectionMode.MULTIPLE, "A", False)
    assert selection == {"B"}


def test_none_mode_ignores_toggles():
    selection = frozenset({"A"})
    assert toggle_row(selection, SelectionMode.NONE, "B", True) == {"A"}
    assert toggle_row(selection, SelectionMode.NONE, "A", False) == {"A"}


def test_select_page_replaces_selection_with_page_ids():
    selection = frozenset({"off-page"})
    result = select_page(selection, SelectionMode.MULTIPLE, ["A", "B"], True)
    assert result == {"A", "B"}


def test_select_page_uncheck_clears_everything():
    selection = frozenset({"A", "off-page"})
    assert select_page(selection, SelectionMode.MULTIPLE, ["A"], False) == set()


def test_select_page_only_in_multiple_mode():
    selection = frozenset({"A"})
    for mode in (SelectionMode.SINGLE, SelectionMode.NONE):
        assert select_page(selection, mode, ["B", "C"], True) == {"A"}


def test_forget_removes_id_and_ignores_unknown():
    assert forget(frozenset({"A", "B"}), "A") == {"B"}
    assert forget(frozenset({"B"}), "missing") == {"B"}


def test_is_page_selected():
    assert is_page_selected(frozenset({"A", "B", "C"}), ["A", "B"]) is True
    assert is_page_selected(frozenset({"A"}), ["A", "B"]) is False
    assert is_page_selected(frozenset({"A"}), []) is False
