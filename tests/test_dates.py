# tests/test_dates.py

import datetime

from services.dates import add_days, days_between, split_weeks, trip_days, weekday_name

MON = datetime.date(2025, 6, 2)


def test_trip_days_inclusive():
    days = trip_days(MON, add_days(MON, 6))
    assert len(days) == 7
    assert days[0] == MON and days[-1] == datetime.date(2025, 6, 8)


def test_trip_days_single_and_inverted():
    assert trip_days(MON, MON) == [MON]
    assert trip_days(MON, add_days(MON, -1)) == []
    assert days_between(MON, add_days(MON, -3)) == -3


def test_split_weeks_starts_on_monday():
    friday = datetime.date(2025, 6, 6)
    weeks = split_weeks(trip_days(friday, datetime.date(2025, 6, 17)))
    assert [len(w) for w in weeks] == [3, 7, 2]
    assert all(w[0].weekday() == 0 for w in weeks[1:])


def test_split_weeks_arrival_on_monday_is_not_split():
    weeks = split_weeks(trip_days(MON, add_days(MON, 6)))
    assert len(weeks) == 1


def test_split_weeks_empty():
    assert split_weeks([]) == []


def test_weekday_name():
    assert weekday_name(MON) == "Mon"
    assert weekday_name(add_days(MON, 6)) == "Sun"
