"""Error taxonomy shared by the calendar math, date values and the picker."""

from __future__ import annotations


class CalendarError(ValueError):
    """Base class for every calendar failure."""


class InvalidDate(CalendarError):
    """A (year, month, day) triple fails a calendar range or day-count check."""

    def __init__(self, field: str, value, message: str | None = None) -> None:
        self.field = field
        self.value = value
        super().__init__(message or f"invalid {field}: {value!r}")


class ParseError(CalendarError):
    """Text is not a canonical YYYY/MM/DD string."""

    def __init__(self, text, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"cannot parse {text!r}: {reason}")


class InvalidDateText(ParseError, InvalidDate):
    """Well-formed text whose triple the calendar rejects."""

    def __init__(self, text: str, cause: InvalidDate) -> None:
        self.text = text
        self.reason = str(cause)
        self.field = cause.field
        self.value = cause.value
        CalendarError.__init__(self, f"cannot parse {text!r}: {cause}")


class OutOfRange(CalendarError):
    """An arithmetic result falls outside the supported span."""

    def __init__(self, value, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or f"{value!r} is outside the supported range")


class SystemMismatch(CalendarError):
    """Operands tagged with different calendar systems."""

    def __init__(self, left, right) -> None:
        self.left = left
        self.right = right
        super().__init__(f"cannot mix {left} and {right} dates; convert first")


class DateDisabled(CalendarError):
    """A selection falls outside the picker's [min_date, max_date] bounds."""

    def __init__(self, date, min_date=None, max_date=None) -> None:
        self.date = date
        self.min_date = min_date
        self.max_date = max_date
        super().__init__(f"{date} is outside the allowed range")
