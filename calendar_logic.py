"""Month grid calculations with no UI dependencies."""

from __future__ import annotations

from typing import Iterator, NamedTuple

import calendar_math as cm
from date_value import GREGORIAN, JALALI, DateValue

# Weeks start on Saturday
WEEKDAY_ABBR = ["ش", "ی", "د", "س", "چ", "پ", "ج"]
WEEKDAY_ABBR_EN = ["Sat", "Sun", "Mon", "Tue", "Wed", "Thu", "Fri"]

MONTH_NAMES = {
    JALALI: [
        "فروردین", "اردیبهشت", "خرداد", "تیر", "مرداد", "شهریور",
        "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند",
    ],
    GREGORIAN: [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ],
}


class GridCell(NamedTuple):
    date: DateValue | None  # None for blank filler
    is_today: bool = False
    is_selected: bool = False
    is_disabled: bool = False


_BLANK = GridCell(None)


def month_name(system: str, month: int) -> str:
    return MONTH_NAMES[system][month - 1]


def header_text(system: str, year: int, month: int) -> str:
    return f"{month_name(system, month)} {year}"


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Return (year, month) *delta* months away, carrying into the year."""
    y, m = divmod(year * 12 + (month - 1) + delta, 12)
    return y, m + 1


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    return shift_month(year, month, -1)


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    return shift_month(year, month, 1)


class MonthGrid:
    """Cells of one viewed month, recomputed on every iteration.

    Holds only its inputs; iterating twice yields the same cells.
    """

    __slots__ = ("system", "year", "month", "selected", "today",
                 "min_date", "max_date", "first", "last")

    def __init__(self, year: int, month: int, selected: DateValue | None,
                 today: DateValue | None, min_date: DateValue | None,
                 max_date: DateValue | None, system: str = JALALI) -> None:
        self.system = system
        self.year = year
        self.month = month
        # Months at the edge of the supported range only show their in-range days
        self.first, self.last = cm.month_span(system, year, month)
        # Compare everything in the grid's own calendar
        self.selected = _in_system(selected, system)
        self.today = _in_system(today, system)
        self.min_date = _in_system(min_date, system)
        self.max_date = _in_system(max_date, system)

    @property
    def first_day(self) -> DateValue:
        return DateValue(self.system, self.year, self.month, self.first)

    @property
    def days(self) -> int:
        return self.last - self.first + 1

    @property
    def leading_blanks(self) -> int:
        return self.first_day.weekday()

    def __len__(self) -> int:
        return self.leading_blanks + self.days

    def __iter__(self) -> Iterator[GridCell]:
        for _ in range(self.leading_blanks):
            yield _BLANK
        for day in range(self.first, self.last + 1):
            d = DateValue(self.system, self.year, self.month, day)
            yield GridCell(
                d,
                is_today=d == self.today,
                is_selected=d == self.selected,
                is_disabled=is_disabled(d, self.min_date, self.max_date),
            )

    def rows(self, pad: bool = True) -> list[list[GridCell]]:
        """Return the cells as weeks of 7.

        With *pad*, trailing blanks fill the last week and the grid always
        has 6 rows so the calendar height stays constant.
        """
        grid: list[list[GridCell]] = []
        row: list[GridCell] = []
        for cell in self:
            row.append(cell)
            if len(row) == 7:
                grid.append(row)
                row = []
        if row:
            grid.append(row + [_BLANK] * (7 - len(row)) if pad else row)
        while pad and len(grid) < 6:
            grid.append([_BLANK] * 7)
        return grid


def _in_system(d: DateValue | None, system: str) -> DateValue | None:
    return None if d is None else d.convert_to(system)


def is_disabled(d: DateValue, min_date: DateValue | None,
                max_date: DateValue | None) -> bool:
    """True if *d* is strictly before *min_date* or strictly after *max_date*."""
    if min_date is not None and d.compare(min_date) < 0:
        return True
    if max_date is not None and d.compare(max_date) > 0:
        return True
    return False


def build_grid(year: int, month: int, selected: DateValue | None,
               today: DateValue | None, min_date: DateValue | None = None,
               max_date: DateValue | None = None,
               system: str = JALALI) -> MonthGrid:
    return MonthGrid(year, month, selected, today, min_date, max_date, system)
