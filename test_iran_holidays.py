"""Fixed Jalali holiday lookup."""

from iran_holidays import DEFAULT_KEYS, HOLIDAYS, holidays_for_month


def test_farvardin_holidays():
    days = holidays_for_month(1403, 1, set(DEFAULT_KEYS))
    assert sorted(days) == [1, 2, 3, 4, 12, 13]
    assert days[1] == ["نوروز"]


def test_only_enabled_keys():
    assert holidays_for_month(1403, 1, {"nature_day"}) == {13: ["روز طبیعت"]}
    assert holidays_for_month(1403, 1, set()) == {}
    assert holidays_for_month(1403, 1, {"unknown"}) == {}


def test_other_months():
    assert sorted(holidays_for_month(1404, 3, set(DEFAULT_KEYS))) == [14, 15]
    assert sorted(holidays_for_month(1404, 12, set(DEFAULT_KEYS))) == [29]
    assert holidays_for_month(1404, 8, set(DEFAULT_KEYS)) == {}


def test_default_keys_cover_registry_in_order():
    assert DEFAULT_KEYS == [key for key, _name, _fn in HOLIDAYS]
    assert DEFAULT_KEYS[0] == "nowruz"
