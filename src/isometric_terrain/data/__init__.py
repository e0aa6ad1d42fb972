"""Input calendars and static color tables."""
