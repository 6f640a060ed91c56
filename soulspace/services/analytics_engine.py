# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import os
from datetime import date, timedelta
from typing import Dict, Iterable, List
from soulspace.schemas.wellness_schemas import DayMood, MoodEntry

# Extra days checked behind the reference day; keeps the scan bounded
STREAK_LOOKBACK_DAYS = int(os.getenv("STREAK_LOOKBACK_DAYS", "7"))
WEEK_DAYS = 7


def _index_by_day(moods: Iterable[MoodEntry]) -> Dict[date, MoodEntry]:
    by_day = {}
    for mood in moods:
        by_day.setdefault(mood.calendar_date, mood)
    return by_day


def has_logged_on(moods: Iterable[MoodEntry], day: date) -> bool:
    return any(m.calendar_date == day for m in moods)


def compute_streak(moods: Iterable[MoodEntry], as_of: date, lookback_days: int = STREAK_LOOKBACK_DAYS) -> int:
    """
    Consecutive logged days ending at `as_of`. Zero when `as_of` itself has no
    mood; otherwise walks back one day at a time for at most `lookback_days`.
    """
    logged_days = set(_index_by_day(moods))
    if as_of not in logged_days:
        return 0

    streak = 1
    check_day = as_of - timedelta(days=1)
    for _ in range(lookback_days):
        if check_day not in logged_days:
            break
        streak += 1
        check_day -= timedelta(days=1)
    return streak


def compute_last_7_days(moods: Iterable[MoodEntry], as_of: date) -> List[DayMood]:
    by_day = _index_by_day(moods)
    days = []
    for offset in range(WEEK_DAYS - 1, -1, -1):
        day = as_of - timedelta(days=offset)
        days.append(DayMood(calendar_date=day, entry=by_day.get(day)))
    return days
