"""Day scheduling for leagues.

The active day is taken from the league's explicit day schedule when one is
set: the most recent scheduled day on or before today. Leagues without a
schedule progress from LEAGUE_START_DATE:
- 'standard' leagues advance one day per week
- 'custom' leagues (camps) advance one day per calendar day
"""

import logging
from datetime import date, datetime
from typing import Optional

from .constants import LEAGUE_START_DATE
from .schemas import LeagueConfig

logger = logging.getLogger('courtside.schedule')


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def parse_schedule_date(value: str) -> Optional[date]:
    """Parse an ISO date or datetime string, returning None if unreadable."""
    try:
        return datetime.fromisoformat(value.strip()).date()
    except (AttributeError, ValueError):
        logger.debug(f'Ignoring unreadable schedule date: {value!r}')
        return None


def get_active_day(current_date: date | datetime, config: LeagueConfig) -> int:
    """
    Calculate the current league day.

    Args:
        current_date: Today's date (or datetime)
        config: League configuration

    Returns:
        Active day number. Scheduled leagues return 1 when every scheduled
        day is still in the future; unscheduled leagues are clamped to
        1..total_days.
    """
    today = _as_date(current_date)

    if config.day_schedules:
        past_or_present = []
        for day, value in config.day_schedules.items():
            scheduled = parse_schedule_date(value)
            if scheduled is not None and scheduled <= today:
                past_or_present.append((scheduled, day))
        if past_or_present:
            return max(past_or_present)[1]
        return 1

    start = LEAGUE_START_DATE.date()
    if today < start:
        return 1

    elapsed = (today - start).days
    if config.league_type == 'standard':
        current_day = elapsed // 7 + 1
    else:
        current_day = elapsed + 1

    return max(1, min(current_day, config.total_days))
