"""Fixed-date Iranian public holidays on the Jalali calendar."""

from __future__ import annotations


def _fixed(m: int, d: int):
    return lambda year: [(m, d)]


def _fixed_range(m: int, d: int, n: int):
    return lambda year: [(m, d + i) for i in range(n)]


# --- Holiday registry: (key, name, dates_fn) ---------------------------------

HOLIDAYS: list[tuple] = [
    ("nowruz",               "نوروز",                     _fixed_range(1, 1, 4)),
    ("islamic_republic_day", "روز جمهوری اسلامی",          _fixed(1, 12)),
    ("nature_day",           "روز طبیعت",                  _fixed(1, 13)),
    ("khomeini_death",       "رحلت امام خمینی",            _fixed(3, 14)),
    ("khordad_15",           "قیام ۱۵ خرداد",              _fixed(3, 15)),
    ("revolution_day",       "پیروزی انقلاب اسلامی",       _fixed(11, 22)),
    ("oil_nationalization",  "ملی شدن صنعت نفت",           _fixed(12, 29)),
]

DEFAULT_KEYS: list[str] = [h[0] for h in HOLIDAYS]


def holidays_for_month(
    year: int, month: int, enabled_keys: set[str],
) -> dict[int, list[str]]:
    """Return {day: [name, ...]} for the enabled holidays in a Jalali month."""
    result: dict[int, list[str]] = {}
    for key, name, dates_fn in HOLIDAYS:
        if key not in enabled_keys:
            continue
        for m, d in dates_fn(year):
            if m == month:
                result.setdefault(d, []).append(name)
    return result
