"""Contribution calendar model, loading and summary statistics"""
import json
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

DAY_NAMES: Tuple[str, ...] = (
    'Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday',
)


class InvalidCalendarError(ValueError):
    """Raised when a calendar document does not have the expected shape"""


@dataclass(frozen=True)
class ActivityDay:
    """A single day of activity from the data source"""
    date: str  # ISO date, YYYY-MM-DD
    count: int
    level: int = 0  # quartile level 0-4 as reported by the source

    @property
    def as_date(self) -> date:
        """Parsed calendar date"""
        return date.fromisoformat(self.date)


@dataclass(frozen=True)
class ContributionCalendar:
    """An ordered run of weeks, oldest first, each holding up to 7 days"""
    username: str
    weeks: Tuple[Tuple[ActivityDay, ...], ...]
    year: Optional[int] = None

    @property
    def days(self) -> List[ActivityDay]:
        """All days flattened in calendar order"""
        return [day for week in self.weeks for day in week]

    @property
    def oldest_date(self) -> Optional[date]:
        """Date of the first day of the oldest week, if any"""
        for week in self.weeks:
            if week:
                return week[0].as_date
        return None


@dataclass(frozen=True)
class ContributionStats:
    """Aggregate statistics used for landmark gating and the stats bar"""
    total: int
    longest_streak: int
    current_streak: int
    most_active_day: str


def compute_stats(calendar: ContributionCalendar) -> ContributionStats:
    """
    Reduce a calendar to its totals and streaks.

    Streaks run over the flattened day sequence, so they carry across week
    boundaries. The current streak counts back from the newest day.
    """
    if not calendar.weeks:
        return ContributionStats(total=0, longest_streak=0, current_streak=0,
                                 most_active_day='Monday')

    all_days = calendar.days
    total = sum(day.count for day in all_days)

    longest = 0
    run = 0
    for day in all_days:
        if day.count > 0:
            run += 1
            longest = max(longest, run)
        else:
            run = 0

    current = 0
    for day in reversed(all_days):
        if day.count <= 0:
            break
        current += 1

    day_totals = [0] * len(DAY_NAMES)
    for week in calendar.weeks:
        for index, day in enumerate(week[:len(DAY_NAMES)]):
            day_totals[index] += day.count

    # Ties resolve to the earliest weekday
    busiest = max(range(len(day_totals)), key=lambda i: (day_totals[i], -i))

    return ContributionStats(
        total=total,
        longest_streak=longest,
        current_streak=current,
        most_active_day=DAY_NAMES[busiest],
    )


def _parse_day(raw: Dict[str, Any]) -> ActivityDay:
    try:
        day_date = str(raw['date'])
        count = int(raw.get('count', 0))
        level = int(raw.get('level', 0))
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidCalendarError(f"Malformed day entry {raw!r}: {exc}") from exc

    if count < 0:
        raise InvalidCalendarError(f"Negative count on {day_date}: {count}")
    try:
        date.fromisoformat(day_date)
    except ValueError as exc:
        raise InvalidCalendarError(f"Unparseable date {day_date!r}") from exc

    return ActivityDay(date=day_date, count=count, level=level)


def calendar_from_dict(data: Dict[str, Any], username: Optional[str] = None) -> ContributionCalendar:
    """
    Build a calendar from a decoded JSON document.

    Args:
        data: Mapping with a "weeks" list, each week a mapping with a "days" list
              (a bare list of days is accepted too)
        username: Overrides the document's username when given

    Returns:
        ContributionCalendar

    Raises:
        InvalidCalendarError: if the document shape is wrong
    """
    if not isinstance(data, dict) or not isinstance(data.get('weeks'), list):
        raise InvalidCalendarError("Calendar document must contain a 'weeks' list")

    weeks: List[Tuple[ActivityDay, ...]] = []
    for index, raw_week in enumerate(data['weeks']):
        raw_days = raw_week.get('days') if isinstance(raw_week, dict) else raw_week
        if not isinstance(raw_days, list):
            raise InvalidCalendarError(f"Week {index} has no 'days' list")
        weeks.append(tuple(_parse_day(raw) for raw in raw_days))

    year = data.get('year')
    try:
        parsed_year = int(year) if year is not None else None
    except (TypeError, ValueError) as exc:
        raise InvalidCalendarError(f"Invalid year {year!r}") from exc

    calendar = ContributionCalendar(
        username=username or str(data.get('username', '')),
        weeks=tuple(weeks),
        year=parsed_year,
    )
    logger.debug(f"Parsed calendar for {calendar.username!r}: {len(weeks)} weeks")
    return calendar


def load_calendar(path: Path, username: Optional[str] = None) -> ContributionCalendar:
    """Load a calendar from a JSON file"""
    path = Path(path)
    try:
        with open(path) as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise InvalidCalendarError(f"{path} is not valid JSON: {exc}") from exc

    calendar = calendar_from_dict(data, username=username)
    logger.info(f"Loaded {len(calendar.weeks)} weeks from {path}")
    return calendar
