"""Immutable calendar date tagged with its calendar system."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time

import calendar_math as cm
from errors import InvalidDate, InvalidDateText, OutOfRange, ParseError, SystemMismatch

GREGORIAN = cm.GREGORIAN
JALALI = cm.JALALI

# Persian and Arabic-Indic digits typed from a Persian keyboard
_DIGITS = str.maketrans("۰۱۲۳۴۵۶۷۸۹٠١٢٣٤٥٦٧٨٩", "01234567890123456789")


@dataclass(frozen=True)
class DateValue:
    system: str
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if self.system not in cm.SYSTEMS:
            raise InvalidDate("system", self.system)
        cm.check_date(self.system, self.year, self.month, self.day)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def create(cls, system: str, year: int, month: int, day: int) -> "DateValue":
        return cls(system, year, month, day)

    @classmethod
    def from_jdn(cls, system: str, jdn: int) -> "DateValue":
        return cls(system, *cm.from_jdn(system, jdn))

    @classmethod
    def from_date(cls, d: date, system: str = JALALI) -> "DateValue":
        """Build from a standard-library (Gregorian) date, e.g. the host's today."""
        return cls(GREGORIAN, d.year, d.month, d.day).convert_to(system)

    @classmethod
    def parse(cls, system: str, text: str) -> "DateValue":
        """Parse the canonical ``YYYY/MM/DD`` form."""
        if not isinstance(text, str):
            raise ParseError(text, "expected a string")
        parts = text.strip().translate(_DIGITS).split("/")
        if len(parts) != 3:
            raise ParseError(text, f"expected 3 parts separated by '/', got {len(parts)}")
        if not all(p.isascii() and p.isdigit() for p in parts):
            raise ParseError(text, "year, month and day must be numeric")
        year, month, day = (int(p) for p in parts)
        try:
            return cls(system, year, month, day)
        except InvalidDate as exc:
            raise InvalidDateText(text, exc) from exc

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------
    def to_jdn(self) -> int:
        return cm.to_jdn(self.system, self.year, self.month, self.day)

    def convert_to(self, system: str) -> "DateValue":
        if system == self.system:
            return self
        return DateValue.from_jdn(system, self.to_jdn())

    def to_date(self) -> date:
        g = self.convert_to(GREGORIAN)
        return date(g.year, g.month, g.day)

    def to_timestamp(self, hour: int = 0, minute: int = 0) -> str:
        """ISO timestamp for a machine-readable form field.

        The hour/minute pair belongs to the caller and is only range-checked.
        """
        if not 0 <= hour <= 23:
            raise InvalidDate("hour", hour)
        if not 0 <= minute <= 59:
            raise InvalidDate("minute", minute)
        return datetime.combine(self.to_date(), time(hour, minute)).isoformat(timespec="minutes")

    # ------------------------------------------------------------------
    # Arithmetic / comparison
    # ------------------------------------------------------------------
    def add_days(self, n: int) -> "DateValue":
        jdn = self.to_jdn() + n
        if not cm.MIN_JDN <= jdn <= cm.MAX_JDN:
            raise OutOfRange(jdn, f"{self.format()} {n:+d} days is outside the supported range")
        return DateValue.from_jdn(self.system, jdn)

    def compare(self, other: "DateValue") -> int:
        if other.system != self.system:
            raise SystemMismatch(self.system, other.system)
        a = (self.year, self.month, self.day)
        b = (other.year, other.month, other.day)
        return (a > b) - (a < b)

    def weekday(self) -> int:
        """Saturday = 0 … Friday = 6."""
        return cm.weekday(self.to_jdn())

    def is_leap_year(self) -> bool:
        if self.system == JALALI:
            return cm.is_leap_jalali_year(self.year)
        return cm.is_leap_gregorian_year(self.year)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------
    def format(self) -> str:
        return f"{self.year:04d}/{self.month:02d}/{self.day:02d}"

    def __str__(self) -> str:
        return self.format()
