"""Tests for calendar loading and statistics"""
import json

import pytest

from isometric_terrain.data.activity import (
    ContributionCalendar,
    InvalidCalendarError,
    calendar_from_dict,
    compute_stats,
    load_calendar,
)

from conftest import SAMPLE_WEEKS, calendar_dict, make_calendar


class TestComputeStats:
    """Test totals, streaks and busiest weekday"""

    def test_sample_calendar(self, sample_calendar):
        """Test the four-week sample against hand-computed values"""
        stats = compute_stats(sample_calendar)
        assert stats.total == 42
        assert stats.longest_streak == 7
        assert stats.current_streak == 3
        assert stats.most_active_day == 'Wednesday'

    def test_empty_calendar(self):
        """Test an empty calendar falls back to Monday"""
        stats = compute_stats(ContributionCalendar(username='nobody', weeks=()))
        assert stats.total == 0
        assert stats.longest_streak == 0
        assert stats.current_streak == 0
        assert stats.most_active_day == 'Monday'

    def test_streak_crosses_week_boundary(self):
        """Test streaks carry over from Saturday to Sunday"""
        stats = compute_stats(make_calendar([[0, 0, 0, 0, 0, 1, 1], [1, 1, 0, 0, 0, 0, 0]]))
        assert stats.longest_streak == 4
        assert stats.current_streak == 0

    def test_weekday_tie_goes_to_earliest(self):
        """Test equal weekday totals resolve to the earlier day"""
        stats = compute_stats(make_calendar([[0, 3, 3, 0, 0, 0, 0]]))
        assert stats.most_active_day == 'Monday'


class TestCalendarLoading:
    """Test parsing calendar documents"""

    def test_round_trip_through_dict(self):
        """Test a well-formed document parses into the same counts"""
        calendar = calendar_from_dict(calendar_dict(SAMPLE_WEEKS))
        assert [[d.count for d in week] for week in calendar.weeks] == SAMPLE_WEEKS
        assert calendar.username == 'octocat'
        assert calendar.year == 2025

    def test_username_override(self):
        """Test the explicit username wins over the document's"""
        calendar = calendar_from_dict(calendar_dict(SAMPLE_WEEKS), username='hubot')
        assert calendar.username == 'hubot'

    def test_missing_weeks(self):
        """Test a document without weeks is rejected"""
        with pytest.raises(InvalidCalendarError):
            calendar_from_dict({'username': 'x'})

    def test_negative_count(self):
        """Test negative counts are rejected"""
        data = {'weeks': [{'days': [{'date': '2025-01-05', 'count': -1}]}]}
        with pytest.raises(InvalidCalendarError):
            calendar_from_dict(data)

    def test_bad_date(self):
        """Test unparseable dates are rejected"""
        data = {'weeks': [{'days': [{'date': 'yesterday', 'count': 1}]}]}
        with pytest.raises(InvalidCalendarError):
            calendar_from_dict(data)

    @pytest.mark.parametrize('year', ['soon', [2024], {'y': 2024}])
    def test_bad_year(self, year):
        """Test a year that is not a number is rejected"""
        with pytest.raises(InvalidCalendarError):
            calendar_from_dict({'weeks': [], 'year': year})

    def test_numeric_string_year(self):
        """Test a year given as digits is accepted"""
        assert calendar_from_dict({'weeks': [], 'year': '2024'}).year == 2024

    def test_invalid_calendar_is_value_error(self):
        """Test callers catching ValueError also catch calendar errors"""
        assert issubclass(InvalidCalendarError, ValueError)

    def test_load_calendar_file(self, tmp_path):
        """Test loading from a JSON file"""
        path = tmp_path / 'calendar.json'
        path.write_text(json.dumps(calendar_dict(SAMPLE_WEEKS)))
        calendar = load_calendar(path)
        assert len(calendar.weeks) == 4
        assert calendar.oldest_date.isoformat() == '2025-01-05'

    def test_load_calendar_bad_json(self, tmp_path):
        """Test invalid JSON surfaces as a calendar error"""
        path = tmp_path / 'calendar.json'
        path.write_text('{not json')
        with pytest.raises(InvalidCalendarError):
            load_calendar(path)
