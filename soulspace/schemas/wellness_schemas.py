# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.

"""
Wellness log records. Field aliases match the persisted layout
({mood, date, loggedAt} and {text, createdAt, date}).
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import date, datetime
from soulspace.utils.wellness_constants import MoodName


class MoodEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    mood_name: MoodName = Field(..., alias="mood")
    calendar_date: date = Field(..., alias="date")
    logged_at: datetime = Field(..., alias="loggedAt")


class JournalEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    text: str = Field(..., min_length=1)
    created_at: datetime = Field(..., alias="createdAt")
    calendar_date: date = Field(..., alias="date")


class LogSnapshot(BaseModel):
    moods: List[MoodEntry] = Field(default_factory=list)
    journals: List[JournalEntry] = Field(default_factory=list)


class AppendMoodResult(BaseModel):
    recorded: bool
    entry: Optional[MoodEntry] = None


class DayMood(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    calendar_date: date = Field(..., alias="date")
    entry: Optional[MoodEntry] = None  # None when nothing was logged that day
