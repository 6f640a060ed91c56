# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


from pydantic import BaseModel
from typing import Optional
from datetime import date


class MoodLogRequest(BaseModel):
    mood: str
    on_date: Optional[date] = None  # defaults to today


class JournalAddRequest(BaseModel):
    text: str


class MeditationStartRequest(BaseModel):
    title: str


class GuessRequest(BaseModel):
    key: str


class FeedPostRequest(BaseModel):
    mood: str
    text: str
