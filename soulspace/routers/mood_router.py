# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends
from soulspace.routers.dependencies import get_companion
from soulspace.schemas.request_schemas import MoodLogRequest
from soulspace.services.analytics_engine import compute_last_7_days, compute_streak, has_logged_on
from soulspace.services.companion import Companion
from soulspace.utils.wellness_constants import MOOD_OPTIONS

router = APIRouter(prefix="/mood", tags=["Mood Tracker"])


@router.get("/options")
def mood_options():
    return [
        {"name": o.name.value, "emoji": o.emoji, "color_class": o.color_class, "hover": o.hover}
        for o in MOOD_OPTIONS
    ]


@router.post("/log")
def log_mood(payload: MoodLogRequest, companion: Companion = Depends(get_companion)):
    on_date = payload.on_date or companion.today()
    result = companion.log_store.append_mood(payload.mood, on_date)

    return {
        "message": "✅ Mood logged" if result.recorded else "🔁 Mood already logged for this day",
        "recorded": result.recorded,
        "entry": result.entry,
    }


@router.get("/history")
def mood_history(companion: Companion = Depends(get_companion)):
    return companion.log_store.load_snapshot().moods


@router.get("/insights")
def mood_insights(as_of: Optional[date] = None, companion: Companion = Depends(get_companion)):
    as_of = as_of or companion.today()
    moods = companion.log_store.load_snapshot().moods

    return {
        "as_of": as_of,
        "streak": compute_streak(moods, as_of),
        "logged_today": has_logged_on(moods, as_of),
        "last_7_days": compute_last_7_days(moods, as_of),
    }
