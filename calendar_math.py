"""Pure Gregorian <-> Jalali conversions with no state or I/O.

Both calendars are mapped onto the Julian Day Number (JDN), a continuous
day count.  The Jalali leap pattern follows the astronomical break-point
table: the 33-year cycle is restarted at each break year, and the leap
phase of any year is located by walking the table.
"""

from __future__ import annotations

from errors import InvalidDate, OutOfRange

GREGORIAN = "gregorian"
JALALI = "jalali"
SYSTEMS = (GREGORIAN, JALALI)

# Years at which the 33-year leap cycle is reset.
BREAKS = (
    -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181, 1210,
    1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178,
)

JALALI_MIN_YEAR = 1
JALALI_MAX_YEAR = 3000

_GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


# --- Gregorian ----------------------------------------------------------------

def is_leap_gregorian_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _gregorian_month_days(year: int, month: int) -> int:
    if month == 2 and is_leap_gregorian_year(year):
        return 29
    return _GREGORIAN_MONTH_DAYS[month - 1]


def _gregorian_jdn(year: int, month: int, day: int) -> int:
    # Fliegel–Van Flandern, rearranged so every operand stays positive.
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def _jdn_gregorian(jdn: int) -> tuple[int, int, int]:
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - 146097 * b // 4
    d = (4 * c + 3) // 1461
    e = c - 1461 * d // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return year, month, day


# --- Jalali -------------------------------------------------------------------

def _jal_cal(year: int) -> tuple[int, int, int]:
    """Return (leap, gregorian_year, march_day) for a Jalali year.

    *leap* is the number of years since the last leap year (0 means *year*
    itself is leap), *march_day* is the day in March of the Gregorian year
    on which Farvardin 1st falls.
    """
    if year < BREAKS[0] or year >= BREAKS[-1]:
        raise InvalidDate("year", year, f"Jalali year {year} is outside the break table")

    gy = year + 621
    leap_j = -14
    jp = BREAKS[0]
    jump = 0
    for jm in BREAKS[1:]:
        jump = jm - jp
        if year < jm:
            break
        leap_j += jump // 33 * 8 + jump % 33 // 4
        jp = jm
    n = year - jp

    # Leap days from the start of the cycle up to this year
    leap_j += n // 33 * 8 + (n % 33 + 3) // 4
    if jump % 33 == 4 and jump - n == 4:
        leap_j += 1

    leap_g = gy // 4 - (gy // 100 + 1) * 3 // 4 - 150
    march = 20 + leap_j - leap_g

    if jump - n < 6:
        n = n - jump + (jump + 4) // 33 * 33
    leap = (n + 1) % 33 - 1
    leap = 4 if leap == -1 else leap % 4
    return leap, gy, march


def _check_jalali_year(year: int) -> None:
    if not JALALI_MIN_YEAR <= year <= JALALI_MAX_YEAR:
        raise InvalidDate(
            "year", year,
            f"Jalali year {year} is outside {JALALI_MIN_YEAR}..{JALALI_MAX_YEAR}",
        )


def is_leap_jalali_year(year: int) -> bool:
    """True if Esfand (month 12) of *year* has 30 days."""
    _check_jalali_year(year)
    return _jal_cal(year)[0] == 0


def jalali_year_start(year: int) -> tuple[int, int, int]:
    """Return the Gregorian date of Farvardin 1st (Nowruz) of *year*."""
    _check_jalali_year(year)
    _leap, gy, march = _jal_cal(year)
    return gy, 3, march


def _jalali_month_days(year: int, month: int) -> int:
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_leap_jalali_year(year) else 29


def _jalali_jdn(year: int, month: int, day: int) -> int:
    _leap, gy, march = _jal_cal(year)
    if month <= 6:
        offset = (month - 1) * 31
    else:
        offset = 186 + (month - 7) * 30
    return _gregorian_jdn(gy, 3, march) + offset + day - 1


def _jdn_jalali(jdn: int) -> tuple[int, int, int]:
    gy = _jdn_gregorian(jdn)[0]
    year = gy - 621
    leap, _gy, march = _jal_cal(year)
    k = jdn - _gregorian_jdn(gy, 3, march)

    if k >= 0:
        if k <= 185:
            return year, 1 + k // 31, k % 31 + 1
        k -= 186
    else:
        # Still in the previous Jalali year (Gregorian Jan..March)
        year -= 1
        k += 179
        if leap == 1:
            k += 1
    return year, 7 + k // 30, k % 30 + 1


# --- Supported span -------------------------------------------------------------

MIN_JDN = _jalali_jdn(JALALI_MIN_YEAR, 1, 1)
MAX_JDN = _jalali_jdn(JALALI_MAX_YEAR, 12, _jalali_month_days(JALALI_MAX_YEAR, 12))


def _check_jdn(jdn: int) -> None:
    if not MIN_JDN <= jdn <= MAX_JDN:
        raise OutOfRange(jdn, f"JDN {jdn} is outside {MIN_JDN}..{MAX_JDN}")


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise InvalidDate("month", month)


def days_in_month(system: str, year: int, month: int) -> int:
    _check_month(month)
    if system == JALALI:
        _check_jalali_year(year)
        return _jalali_month_days(year, month)
    if system == GREGORIAN:
        return _gregorian_month_days(year, month)
    raise InvalidDate("system", system)


def check_date(system: str, year: int, month: int, day: int) -> None:
    """Raise InvalidDate if the triple is not a supported date in *system*."""
    if system == JALALI:
        _check_jalali_year(year)
    _check_month(month)
    if not 1 <= day <= days_in_month(system, year, month):
        raise InvalidDate("day", day, f"day {day} is not in {system} {year}/{month:02d}")
    if system == GREGORIAN and not MIN_JDN <= _gregorian_jdn(year, month, day) <= MAX_JDN:
        raise InvalidDate("year", year, f"{year}/{month:02d}/{day:02d} is outside the supported range")


def is_valid_date(system: str, year: int, month: int, day: int) -> bool:
    try:
        check_date(system, year, month, day)
    except InvalidDate:
        return False
    return True


def is_valid_jalali(year: int, month: int, day: int) -> bool:
    return is_valid_date(JALALI, year, month, day)


def is_valid_gregorian(year: int, month: int, day: int) -> bool:
    return is_valid_date(GREGORIAN, year, month, day)


def month_span(system: str, year: int, month: int) -> tuple[int, int]:
    """Return the first and last supported day numbers of a month.

    Jalali months in range are always whole; the Gregorian months holding
    the span edges are cut at MIN_JDN and MAX_JDN.
    """
    last = days_in_month(system, year, month)
    if system == JALALI:
        return 1, last
    start = _gregorian_jdn(year, month, 1)
    end = start + last - 1
    if end < MIN_JDN or start > MAX_JDN:
        raise InvalidDate("year", year, f"{year}/{month:02d} is outside the supported range")
    return max(start, MIN_JDN) - start + 1, min(end, MAX_JDN) - start + 1


# --- Public conversions -----------------------------------------------------------

def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    check_date(GREGORIAN, year, month, day)
    return _gregorian_jdn(year, month, day)


def jdn_to_gregorian(jdn: int) -> tuple[int, int, int]:
    _check_jdn(jdn)
    return _jdn_gregorian(jdn)


def jalali_to_jdn(year: int, month: int, day: int) -> int:
    check_date(JALALI, year, month, day)
    return _jalali_jdn(year, month, day)


def jdn_to_jalali(jdn: int) -> tuple[int, int, int]:
    _check_jdn(jdn)
    return _jdn_jalali(jdn)


def to_jdn(system: str, year: int, month: int, day: int) -> int:
    if system == JALALI:
        return jalali_to_jdn(year, month, day)
    if system == GREGORIAN:
        return gregorian_to_jdn(year, month, day)
    raise InvalidDate("system", system)


def from_jdn(system: str, jdn: int) -> tuple[int, int, int]:
    if system == JALALI:
        return jdn_to_jalali(jdn)
    if system == GREGORIAN:
        return jdn_to_gregorian(jdn)
    raise InvalidDate("system", system)


def gregorian_to_jalali(year: int, month: int, day: int) -> tuple[int, int, int]:
    return _jdn_jalali(gregorian_to_jdn(year, month, day))


def jalali_to_gregorian(year: int, month: int, day: int) -> tuple[int, int, int]:
    return _jdn_gregorian(jalali_to_jdn(year, month, day))


def weekday(jdn: int) -> int:
    """Day of week with Saturday = 0 … Friday = 6."""
    # JDN 0 is a Monday
    return (jdn + 2) % 7
