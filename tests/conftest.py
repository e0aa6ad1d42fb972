"""Shared calendar factories for the terrain tests"""
from datetime import date, timedelta
from typing import List, Optional, Sequence

import pytest

from isometric_terrain.data.activity import ActivityDay, ContributionCalendar, ContributionStats

SAMPLE_START = date(2025, 1, 5)  # a Sunday

SAMPLE_WEEKS = [
    [0, 2, 0, 5, 3, 0, 1],
    [1, 3, 1, 6, 2, 1, 0],
    [0, 0, 0, 8, 0, 0, 0],
    [0, 1, 0, 0, 3, 2, 3],
]


def make_calendar(
    weeks: Sequence[Sequence[int]],
    start: date = SAMPLE_START,
    username: str = 'octocat',
    year: Optional[int] = 2025,
) -> ContributionCalendar:
    """Calendar whose weeks hold the given daily counts, consecutive from start"""
    built: List[tuple] = []
    current = start
    for counts in weeks:
        days = []
        for count in counts:
            days.append(ActivityDay(date=current.isoformat(), count=count, level=min(count, 4)))
            current += timedelta(days=1)
        built.append(tuple(days))
    return ContributionCalendar(username=username, weeks=tuple(built), year=year)


def year_counts(pattern: int = 0) -> List[List[int]]:
    """52 weeks of varied, deterministic counts"""
    return [[(w * 7 + d * 3 + pattern) % 13 for d in range(7)] for w in range(52)]


def calendar_dict(weeks: Sequence[Sequence[int]], start: date = SAMPLE_START) -> dict:
    """Calendar in its JSON document form"""
    calendar = make_calendar(weeks, start)
    return {
        'username': calendar.username,
        'year': calendar.year,
        'weeks': [
            {'days': [{'date': d.date, 'count': d.count, 'level': d.level} for d in week]}
            for week in calendar.weeks
        ],
    }


@pytest.fixture
def sample_calendar() -> ContributionCalendar:
    return make_calendar(SAMPLE_WEEKS)


@pytest.fixture
def year_calendar() -> ContributionCalendar:
    return make_calendar(year_counts(), start=date(2024, 6, 16))


@pytest.fixture
def zero_calendar() -> ContributionCalendar:
    return make_calendar([[0] * 7 for _ in range(52)], start=date(2024, 6, 16))


@pytest.fixture
def uniform_calendar() -> ContributionCalendar:
    return make_calendar([[20] * 7 for _ in range(52)], start=date(2024, 6, 16))


@pytest.fixture
def legendary_stats() -> ContributionStats:
    return ContributionStats(total=5000, longest_streak=120, current_streak=45, most_active_day='Tuesday')


@pytest.fixture
def quiet_stats() -> ContributionStats:
    return ContributionStats(total=10, longest_streak=2, current_streak=0, most_active_day='Monday')
