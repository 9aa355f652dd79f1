"""Date picker state machine driving the month grid.

The controller owns a :class:`PickerState` and never touches a UI toolkit:
hosts call its operations, then read :meth:`DatePickerController.grid` and
the canonical selected-date string back out.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable

from calendar_logic import MonthGrid, build_grid, header_text, is_disabled, shift_month
from calendar_math import month_span
from date_value import JALALI, DateValue
from errors import DateDisabled, InvalidDate
from logger import get_logger

logger = get_logger(__name__)

# (label, days from today) shortcuts: tomorrow, next week, next month
QUICK_DATES: tuple[tuple[str, int], ...] = (
    ("فردا", 1),
    ("هفته آینده", 7),
    ("ماه آینده", 30),
)

Listener = Callable[["DateValue | None", str], None]


@dataclass
class PickerState:
    viewed_year: int
    viewed_month: int
    selected_date: DateValue | None = None
    min_date: DateValue | None = None
    max_date: DateValue | None = None
    is_open: bool = False


class DatePickerController:
    """Open/closed picker over one month view with bounded selection."""

    def __init__(self, today: DateValue, system: str = JALALI,
                 selected_date: DateValue | None = None,
                 min_date: DateValue | None = None,
                 max_date: DateValue | None = None,
                 on_change: Listener | None = None) -> None:
        self.system = system
        self.today = today.convert_to(system)
        self._listeners: list[Listener] = []
        if on_change is not None:
            self._listeners.append(on_change)

        selected = self._local(selected_date)
        anchor = selected or self.today
        self.state = PickerState(anchor.year, anchor.month, selected)
        self.set_bounds(min_date, max_date)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def is_open(self) -> bool:
        return self.state.is_open

    @property
    def selected_date(self) -> DateValue | None:
        return self.state.selected_date

    @property
    def viewed(self) -> tuple[int, int]:
        return self.state.viewed_year, self.state.viewed_month

    def grid(self) -> MonthGrid:
        s = self.state
        return build_grid(s.viewed_year, s.viewed_month, s.selected_date,
                          self.today, s.min_date, s.max_date, self.system)

    def header_text(self) -> str:
        return header_text(self.system, self.state.viewed_year, self.state.viewed_month)

    def display_text(self) -> str:
        """Canonical string for the visible input field ("" when empty)."""
        d = self.state.selected_date
        return d.format() if d is not None else ""

    def is_disabled(self, date: DateValue) -> bool:
        return is_disabled(date.convert_to(self.system), self.state.min_date, self.state.max_date)

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _notify(self) -> None:
        d = self.state.selected_date
        text = self.display_text()
        for listener in list(self._listeners):
            listener(d, text)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def set_bounds(self, min_date: DateValue | None, max_date: DateValue | None) -> None:
        lo = self._local(min_date)
        hi = self._local(max_date)
        if lo is not None and hi is not None and lo.compare(hi) > 0:
            raise InvalidDate("bounds", (lo.format(), hi.format()),
                              f"min date {lo} is after max date {hi}")
        self.state.min_date = lo
        self.state.max_date = hi

    def set_today(self, today: DateValue) -> None:
        self.today = today.convert_to(self.system)

    def set_date(self, text: str) -> None:
        """Select a typed or initial string without closing.

        Listeners get the canonical form, so a field holding " ۱۴۰۳/۱/۱ "
        is rewritten to "1403/01/01".
        """
        d = DateValue.parse(self.system, text)
        self.state.selected_date = d
        self._snap(d)
        self._notify()

    # ------------------------------------------------------------------
    # Open / close
    # ------------------------------------------------------------------
    def open(self) -> None:
        self._snap(self.state.selected_date or self.today)
        self.state.is_open = True
        logger.debug("Picker opened on %04d/%02d", *self.viewed)

    def close(self) -> None:
        self.state.is_open = False

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def change_month(self, delta: int) -> None:
        year, month = shift_month(self.state.viewed_year, self.state.viewed_month, delta)
        self._view(year, month)

    def change_year(self, delta: int) -> None:
        self._view(self.state.viewed_year + delta, self.state.viewed_month)

    def navigate_by(self, days_delta: int) -> None:
        """Move the selection by *days_delta* days, keeping the picker open."""
        base = self.state.selected_date or self.today
        moved = base.add_days(days_delta)
        self.state.selected_date = moved
        if (moved.year, moved.month) != self.viewed:
            self._snap(moved)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def select_date(self, date: DateValue) -> DateValue:
        d = date.convert_to(self.system)
        if self.is_disabled(d):
            logger.warning("Rejected selection %s outside [%s, %s]",
                           d, self.state.min_date, self.state.max_date)
            raise DateDisabled(d, self.state.min_date, self.state.max_date)
        self.state = replace(self.state, selected_date=d, viewed_year=d.year,
                             viewed_month=d.month, is_open=False)
        logger.debug("Selected %s", d)
        self._notify()
        return d

    def select_today(self) -> DateValue:
        return self.select_date(self.today)

    def select_relative(self, days_from_today: int) -> DateValue:
        return self.select_date(self.today.add_days(days_from_today))

    def confirm(self) -> DateValue | None:
        """Commit the keyboard selection; no-op while nothing is selected."""
        if self.state.selected_date is None:
            return None
        return self.select_date(self.state.selected_date)

    def clear(self) -> None:
        self.state.selected_date = None
        logger.debug("Selection cleared")
        self._notify()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _local(self, d: DateValue | None) -> DateValue | None:
        return None if d is None else d.convert_to(self.system)

    def _view(self, year: int, month: int) -> None:
        # Raises InvalidDate before any mutation if no day of the month is supported
        month_span(self.system, year, month)
        self.state.viewed_year = year
        self.state.viewed_month = month

    def _snap(self, d: DateValue) -> None:
        self.state.viewed_year = d.year
        self.state.viewed_month = d.month
