# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.

import os
from datetime import date, datetime
from pytz import timezone, utc

# ✅ Calendar days are counted in the device's local zone
APP_TIMEZONE = timezone(os.getenv("APP_TIMEZONE", "UTC"))


def local_now() -> datetime:
    return datetime.now(utc).astimezone(APP_TIMEZONE)


def to_calendar_date(value) -> date:
    """
    Date-only truncation. Aware datetimes are moved into APP_TIMEZONE first,
    naive ones are taken as already local.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(APP_TIMEZONE)
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")


def as_local(value: datetime) -> datetime:
    """Naive timestamps are taken as local wall time so they order against aware ones."""
    if value.tzinfo is None:
        return APP_TIMEZONE.localize(value)
    return value.astimezone(APP_TIMEZONE)
