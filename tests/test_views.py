"""Tests for view model builders."""

from datetime import date, datetime

import pytest

from famcal.adapters.demo_seed import DemoCalendarSource
from famcal.core.events import ColorKey, Event, Participant
from famcal.core.layout import LayoutMode
from famcal.core.views import (
    build_day,
    build_month,
    build_schedule,
    build_week,
    event_fill,
    event_participants,
    format_time_range,
    hour_label,
    next_week_label,
)


@pytest.fixture
def demo():
    return DemoCalendarSource()


@pytest.fixture
def participants(demo):
    return demo.load_participants()


@pytest.fixture
def events(demo):
    return demo.load_events()


class TestFormatting:
    def test_time_range(self):
        e = Event("2", "Hh", datetime(2025, 12, 1, 15, 45), datetime(2025, 12, 1, 16, 45))
        assert format_time_range(e) == "3:45 PM - 4:45 PM"

    def test_time_range_midnight_and_noon(self):
        e = Event("x", "X", datetime(2025, 12, 1, 0, 5), datetime(2025, 12, 1, 12, 0))
        assert format_time_range(e) == "12:05 AM - 12:00 PM"

    def test_time_range_all_day(self):
        e = Event("h1", "Christmas", datetime(2025, 12, 25), datetime(2025, 12, 25), is_all_day=True)
        assert format_time_range(e) == "All Day"

    @pytest.mark.parametrize(
        "hour,label",
        [(0, "12 AM"), (1, "1 AM"), (11, "11 AM"), (12, "12 PM"), (13, "1 PM"), (23, "11 PM")],
    )
    def test_hour_label(self, hour, label):
        assert hour_label(hour) == label

    def test_next_week_label_same_month(self):
        assert next_week_label(date(2025, 12, 7)) == "Dec 7 - 13"

    def test_next_week_label_across_months(self):
        assert next_week_label(date(2025, 12, 28)) == "Dec 28 - Jan 3"


class TestEventFill:
    def test_solid_fill_from_participant(self, participants, events):
        fill = event_fill(events[0], participants)  # u3 / mint
        assert not fill.is_striped
        assert fill.style == ColorKey.MINT.style

    def test_striped_fill_for_joint_event(self, participants):
        e = Event("3", "Hn", datetime(2025, 12, 1, 15), datetime(2025, 12, 1, 16), participant_ids=["u2", "u5"])
        fill = event_fill(e, participants)
        assert fill.is_striped
        assert fill.gradient == (
            "linear-gradient(135deg, #B3CDE0 0%, #B3CDE0 50%, #F4B6C2 50%, #F4B6C2 100%)"
        )

    def test_unknown_participant_in_joint_event_uses_default(self, participants):
        e = Event("x", "X", datetime(2025, 12, 1, 9), datetime(2025, 12, 1, 10), participant_ids=["u5", "ghost"])
        fill = event_fill(e, participants)
        assert "#B3CDE0 50%, #B3CDE0 100%" in fill.gradient

    def test_unattributed_uses_default(self, participants):
        e = Event("x", "X", datetime(2025, 12, 1, 9), datetime(2025, 12, 1, 10))
        assert event_fill(e, participants).style == ColorKey.CAL_BLUE.style

    def test_single_item_list_is_solid(self, participants):
        e = Event("x", "X", datetime(2025, 12, 1, 9), datetime(2025, 12, 1, 10), participant_ids=["u5"])
        fill = event_fill(e, participants)
        assert not fill.is_striped
        assert fill.style == ColorKey.PINK.style

    def test_event_participants_skips_unknown(self, participants):
        e = Event("x", "X", datetime(2025, 12, 1, 9), datetime(2025, 12, 1, 10), participant_ids=["u5", "ghost", "u1"])
        assert [p.id for p in event_participants(e, participants)] == ["u5", "u1"]


class TestBuildDay:
    def test_items_sorted_all_day_first(self):
        events = [
            Event("t", "Timed", datetime(2025, 12, 25, 9), datetime(2025, 12, 25, 10)),
            Event("h1", "Christmas", datetime(2025, 12, 25), datetime(2025, 12, 25), is_all_day=True),
        ]
        agenda = build_day(date(2025, 12, 25), events)
        assert [e.id for e in agenda.items] == ["h1", "t"]

    def test_empty_day(self, events):
        assert build_day(date(2025, 12, 10), events).items == []


class TestBuildSchedule:
    def test_demo_day(self, events):
        schedule = build_schedule(datetime(2025, 12, 1, 8), events)
        assert schedule.date == date(2025, 12, 1)
        assert schedule.all_day == []
        assert [b.event.id for b in schedule.boxes] == ["1", "2", "3", "4"]
        assert schedule.scroll_top == 13 * 120

    def test_all_day_row(self, events):
        schedule = build_schedule(date(2025, 12, 25), events)
        assert [e.id for e in schedule.all_day] == ["h1"]
        assert schedule.boxes == []

    def test_layout_mode_passed_through(self, events):
        schedule = build_schedule(date(2025, 12, 1), events, hour_height=60, mode=LayoutMode.CONNECTED)
        assert schedule.scroll_top == 13 * 60
        assert {b.total_slots for b in schedule.boxes if b.event.id != "1"} == {3}


class TestBuildWeek:
    def test_columns_start_sunday(self, events):
        week = build_week(date(2025, 12, 2), events, today=date(2025, 12, 2))
        assert [c.date for c in week.days][0] == date(2025, 11, 30)
        assert len(week.days) == 7
        assert [c.is_today for c in week.days] == [False, False, True, False, False, False, False]

    def test_events_grouped_by_day(self, events):
        week = build_week(date(2025, 12, 2), events, today=date(2025, 12, 2))
        monday = week.days[1]
        assert [e.id for e in monday.events] == ["1", "2", "3", "4"]
        assert week.days[0].events == []

    def test_next_week_label(self, events):
        week = build_week(date(2025, 12, 2), events, today=date(2025, 12, 2))
        assert week.next_week_label == "Dec 7 - 13"


class TestBuildMonth:
    def test_grid_shape(self, events):
        cells = build_month(date(2025, 12, 2), events, today=date(2025, 12, 2))
        assert len(cells) == 42
        assert cells[0].date == date(2025, 11, 30)
        assert cells[0].in_month is False
        assert cells[1].date == date(2025, 12, 1)
        assert cells[-1].date == date(2026, 1, 10)

    def test_today_marked(self, events):
        cells = build_month(date(2025, 12, 2), events, today=date(2025, 12, 2))
        assert [c.date for c in cells if c.is_today] == [date(2025, 12, 2)]

    def test_holidays_on_padding_cells(self, events):
        cells = {c.date: c for c in build_month(date(2025, 12, 2), events, today=date(2025, 12, 2))}
        assert [h.title for h in cells[date(2025, 12, 25)].holidays] == ["Christmas"]
        new_year = cells[date(2026, 1, 1)]
        assert new_year.in_month is False
        assert [h.title for h in new_year.holidays] == ["New Year"]
        assert cells[date(2025, 12, 25)].events == []

    def test_event_cap_and_overflow(self, events):
        cells = {c.date: c for c in build_month(date(2025, 12, 2), events, today=date(2025, 12, 2), max_events=2)}
        dec1 = cells[date(2025, 12, 1)]
        assert [e.id for e in dec1.events] == ["1", "2"]
        assert dec1.overflow == 2

    def test_negative_cap_hides_everything(self, events):
        cells = {c.date: c for c in build_month(date(2025, 12, 2), events, today=date(2025, 12, 2), max_events=-1)}
        dec1 = cells[date(2025, 12, 1)]
        assert dec1.events == []
        assert dec1.overflow == 4

    def test_padding_cells_hide_ordinary_events(self):
        spill = [Event("n", "Next", datetime(2026, 1, 2, 9), datetime(2026, 1, 2, 10))]
        cells = {c.date: c for c in build_month(date(2025, 12, 2), spill, today=date(2025, 12, 2))}
        assert cells[date(2026, 1, 2)].events == []
