"""DatePickerController state transitions."""

from unittest.mock import Mock

import pytest

import calendar_math as cm
from date_picker import DatePickerController, PickerState
from date_value import GREGORIAN, JALALI, DateValue
from errors import DateDisabled, InvalidDate, ParseError

TODAY = DateValue(JALALI, 1403, 7, 15)


def j(y, m, d):
    return DateValue(JALALI, y, m, d)


def make(**kwargs):
    return DatePickerController(kwargs.pop("today", TODAY), **kwargs)


def test_initial_view_follows_today():
    picker = make()
    assert picker.viewed == (1403, 7)
    assert picker.selected_date is None
    assert not picker.is_open
    assert isinstance(picker.state, PickerState)


def test_initial_view_follows_selection():
    picker = make(selected_date=j(1402, 3, 1))
    assert picker.viewed == (1402, 3)
    assert picker.display_text() == "1402/03/01"


def test_today_given_in_gregorian():
    picker = make(today=DateValue(GREGORIAN, 2024, 3, 20))
    assert picker.today == j(1403, 1, 1)
    assert picker.viewed == (1403, 1)


def test_open_snaps_to_selection_then_today():
    picker = make(selected_date=j(1402, 3, 1))
    picker.change_month(5)
    picker.open()
    assert picker.is_open
    assert picker.viewed == (1402, 3)

    picker.clear()
    picker.change_year(-3)
    picker.close()
    assert not picker.is_open
    picker.open()
    assert picker.viewed == (1403, 7)


def test_close_only_changes_open_flag():
    picker = make(selected_date=j(1403, 7, 1))
    picker.open()
    picker.change_month(1)
    picker.close()
    assert picker.viewed == (1403, 8)
    assert picker.selected_date == j(1403, 7, 1)


def test_change_month_carries_into_year():
    picker = make()
    picker.change_month(6)
    assert picker.viewed == (1404, 1)
    picker.change_month(-13)
    assert picker.viewed == (1402, 12)
    picker.change_month(0)
    assert picker.viewed == (1402, 12)
    assert picker.selected_date is None


def test_change_month_works_while_closed():
    picker = make()
    assert not picker.is_open
    picker.change_month(1)
    assert picker.viewed == (1403, 8)


def test_change_year():
    picker = make(selected_date=j(1403, 7, 1))
    picker.change_year(2)
    assert picker.viewed == (1405, 7)
    assert picker.selected_date == j(1403, 7, 1)


def test_change_month_outside_supported_range_leaves_state():
    picker = make(today=j(1, 1, 10))
    with pytest.raises(InvalidDate):
        picker.change_month(-1)
    assert picker.viewed == (1, 1)
    with pytest.raises(InvalidDate):
        picker.change_year(5000)
    assert picker.viewed == (1, 1)


def test_select_date_closes_and_notifies():
    listener = Mock()
    picker = make(on_change=listener)
    picker.open()
    picker.change_month(3)
    result = picker.select_date(j(1403, 7, 20))
    assert result == j(1403, 7, 20)
    assert picker.selected_date == j(1403, 7, 20)
    assert picker.viewed == (1403, 7)
    assert not picker.is_open
    listener.assert_called_once_with(j(1403, 7, 20), "1403/07/20")


def test_select_date_converts_other_system():
    picker = make()
    picker.select_date(DateValue(GREGORIAN, 2024, 3, 20))
    assert picker.selected_date == j(1403, 1, 1)


def test_select_disabled_date_leaves_state_unchanged():
    listener = Mock()
    picker = make(today=j(1403, 1, 1), selected_date=j(1403, 1, 3),
                  max_date=j(1403, 1, 10), on_change=listener)
    picker.open()
    picker.change_month(2)
    before = (picker.selected_date, picker.viewed, picker.is_open)
    with pytest.raises(DateDisabled) as exc_info:
        picker.select_date(j(1403, 1, 15))
    assert exc_info.value.date == j(1403, 1, 15)
    assert exc_info.value.max_date == j(1403, 1, 10)
    assert (picker.selected_date, picker.viewed, picker.is_open) == before
    listener.assert_not_called()


def test_select_below_min_date():
    picker = make(min_date=j(1403, 7, 10))
    with pytest.raises(DateDisabled):
        picker.select_date(j(1403, 7, 9))
    assert picker.selected_date is None
    picker.select_date(j(1403, 7, 10))
    assert picker.selected_date == j(1403, 7, 10)


def test_select_today_and_relative():
    picker = make()
    picker.select_today()
    assert picker.selected_date == TODAY
    picker.select_relative(1)
    assert picker.selected_date == j(1403, 7, 16)
    picker.select_relative(7)
    assert picker.selected_date == j(1403, 7, 22)
    picker.select_relative(30)
    assert picker.selected_date == j(1403, 8, 15)
    assert picker.viewed == (1403, 8)


def test_select_relative_respects_bounds():
    picker = make(max_date=j(1403, 7, 20))
    with pytest.raises(DateDisabled):
        picker.select_relative(7)
    assert picker.selected_date is None


def test_navigate_back_over_new_year():
    picker = make(today=j(1403, 1, 1), selected_date=j(1403, 1, 1))
    picker.open()
    picker.navigate_by(-1)
    # 1402 is not a leap year
    assert picker.selected_date == j(1402, 12, 29)
    assert picker.viewed == (1402, 12)
    assert picker.is_open


def test_navigate_from_today_when_nothing_selected():
    listener = Mock()
    picker = make(on_change=listener)
    picker.open()
    picker.navigate_by(7)
    assert picker.selected_date == j(1403, 7, 22)
    assert picker.viewed == (1403, 7)
    picker.navigate_by(-30)
    assert picker.selected_date == j(1403, 6, 23)
    assert picker.viewed == (1403, 6)
    listener.assert_not_called()


def test_navigate_keeps_view_within_month():
    picker = make(selected_date=j(1403, 7, 10))
    picker.change_month(2)
    picker.navigate_by(1)
    # Selection stays in Mehr, so the browsed month is left alone
    assert picker.selected_date == j(1403, 7, 11)
    assert picker.viewed == (1403, 9)


def test_confirm_commits_keyboard_selection():
    listener = Mock()
    picker = make(on_change=listener)
    assert picker.confirm() is None
    picker.open()
    picker.navigate_by(1)
    assert picker.confirm() == j(1403, 7, 16)
    assert not picker.is_open
    listener.assert_called_once_with(j(1403, 7, 16), "1403/07/16")


def test_confirm_outside_bounds_raises():
    picker = make(max_date=j(1403, 7, 16))
    picker.open()
    picker.navigate_by(2)
    with pytest.raises(DateDisabled):
        picker.confirm()
    assert picker.is_open
    assert picker.selected_date == j(1403, 7, 17)


def test_clear():
    listener = Mock()
    picker = make(selected_date=j(1403, 7, 1), on_change=listener)
    picker.change_month(2)
    picker.clear()
    assert picker.selected_date is None
    assert picker.viewed == (1403, 9)
    assert picker.display_text() == ""
    listener.assert_called_once_with(None, "")


def test_listeners_can_be_removed():
    first, second = Mock(), Mock()
    picker = make()
    picker.add_listener(first)
    picker.add_listener(second)
    picker.remove_listener(first)
    picker.select_today()
    first.assert_not_called()
    second.assert_called_once()


def test_set_bounds_rejects_inverted_range():
    picker = make()
    with pytest.raises(InvalidDate) as exc_info:
        picker.set_bounds(j(1403, 2, 1), j(1403, 1, 1))
    assert exc_info.value.field == "bounds"
    picker.set_bounds(j(1403, 1, 1), j(1403, 1, 1))
    assert picker.is_disabled(j(1403, 1, 2))
    assert not picker.is_disabled(j(1403, 1, 1))


def test_set_date_parses_without_closing():
    listener = Mock()
    picker = make(on_change=listener)
    picker.open()
    picker.set_date("1402/11/22")
    assert picker.selected_date == j(1402, 11, 22)
    assert picker.viewed == (1402, 11)
    assert picker.is_open
    listener.assert_called_once_with(j(1402, 11, 22), "1402/11/22")
    listener.reset_mock()
    with pytest.raises(ParseError):
        picker.set_date("1402-11-22")
    assert picker.selected_date == j(1402, 11, 22)
    listener.assert_not_called()


def test_set_date_reports_canonical_text():
    listener = Mock()
    picker = make(on_change=listener)
    picker.set_date(" ۱۴۰۳/۱/۵ ")
    listener.assert_called_once_with(j(1403, 1, 5), "1403/01/05")
    assert picker.display_text() == "1403/01/05"
    assert listener.call_args.args[0].to_timestamp() == "2024-03-24T00:00"


def test_set_today():
    picker = make()
    picker.set_today(j(1403, 7, 16))
    picker.select_today()
    assert picker.selected_date == j(1403, 7, 16)


def test_grid_reflects_state():
    picker = make(selected_date=j(1403, 7, 20), min_date=j(1403, 7, 5))
    cells = [c for c in picker.grid() if c.date]
    assert [c.date.day for c in cells if c.is_selected] == [20]
    assert [c.date.day for c in cells if c.is_today] == [15]
    assert [c.date.day for c in cells if c.is_disabled] == [1, 2, 3, 4]
    assert picker.header_text() == "مهر 1403"


def test_gregorian_picker():
    picker = DatePickerController(DateValue(GREGORIAN, 2024, 2, 28), GREGORIAN)
    picker.open()
    picker.navigate_by(1)
    assert picker.selected_date == DateValue(GREGORIAN, 2024, 2, 29)
    assert picker.confirm().format() == "2024/02/29"


def test_gregorian_picker_at_start_of_range():
    start = DateValue.from_jdn(GREGORIAN, cm.MIN_JDN)
    picker = DatePickerController(start.add_days(20), GREGORIAN)
    picker.open()
    picker.navigate_by(-20)
    assert picker.selected_date == start
    assert picker.viewed == (start.year, start.month)
    cells = [c for c in picker.grid() if c.date]
    assert cells[0].date == start
    assert [c.date for c in cells if c.is_selected] == [start]

    picker.change_month(1)
    picker.change_month(-1)
    assert picker.viewed == (start.year, start.month)
    with pytest.raises(InvalidDate):
        picker.change_month(-1)
    assert picker.viewed == (start.year, start.month)


def test_gregorian_picker_at_end_of_range():
    end = DateValue.from_jdn(GREGORIAN, cm.MAX_JDN)
    picker = DatePickerController(end, GREGORIAN)
    picker.open()
    cells = [c for c in picker.grid() if c.date]
    assert cells[-1].date == end
    assert [c.date for c in cells if c.is_today] == [end]
    assert len(picker.grid().rows()) == 6
    with pytest.raises(InvalidDate):
        picker.change_month(1)
    assert picker.viewed == (end.year, end.month)


def test_pickers_do_not_share_state():
    a, b = make(), make()
    a.select_relative(1)
    a.change_month(4)
    assert b.selected_date is None
    assert b.viewed == (1403, 7)
