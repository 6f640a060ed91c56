# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import enum
from dataclasses import dataclass
from typing import Optional

# ✅ Local storage keys
GUEST_ID_KEY = "soulspace_guest_id"
MOOD_LOG_KEY = "soulspace_mood_log"
JOURNAL_ENTRIES_KEY = "soulspace_journal_entries"


class MoodName(enum.Enum):
    joyful = "Joyful"
    calm = "Calm"
    anxious = "Anxious"
    stressed = "Stressed"
    tired = "Tired"
    sad = "Sad"


@dataclass(frozen=True)
class MoodOption:
    name: MoodName
    emoji: str
    color_class: str
    hover: str


MOOD_OPTIONS = [
    MoodOption(MoodName.joyful, "😊", "bg-warning-subtle", "bg-warning"),
    MoodOption(MoodName.calm, "😌", "bg-success-subtle", "bg-success"),
    MoodOption(MoodName.anxious, "😟", "bg-info-subtle", "bg-info"),
    MoodOption(MoodName.stressed, "😩", "bg-danger-subtle", "bg-danger"),
    MoodOption(MoodName.tired, "😴", "bg-primary-subtle", "bg-primary"),
    MoodOption(MoodName.sad, "😭", "bg-secondary-subtle", "bg-secondary"),
]


def find_mood_option(name: str) -> Optional[MoodOption]:
    for option in MOOD_OPTIONS:
        if option.name.value == name:
            return option
    return None


@dataclass(frozen=True)
class EmotionColor:
    name: str
    color: str
    key: str


EMOTIONAL_COLORS = [
    EmotionColor("Joy", "bg-warning", "joy"),
    EmotionColor("Calm", "bg-success", "calm"),
    EmotionColor("Anxiety", "bg-info", "anxiety"),
    EmotionColor("Stress", "bg-danger", "stress"),
    EmotionColor("Tired", "bg-primary", "tired"),
    EmotionColor("Sad", "bg-secondary", "sad"),
]


@dataclass(frozen=True)
class Meditation:
    title: str
    duration_minutes: int
    color: str
    icon: str
    description: str


MEDITATIONS = [
    Meditation("Quick Focus", 5, "#ffc107", "🧠", "A rapid session to reset focus and clear the mind."),
    Meditation("Sleep Prep", 10, "#0d6efd", "💤", "Wind down your thoughts and prepare your body for deep rest."),
    Meditation("Social Anxiety Relief", 15, "#dc3545", "🫂", "Grounding techniques to reduce nervousness in social settings."),
    Meditation("Mindful Eating", 8, "#198754", "🍎", "Focusing on the senses to enjoy your food and slow down."),
]
