# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import json
import logging
import threading
from datetime import date, datetime
from typing import Callable, List, Optional, Tuple
from pydantic import ValidationError as SchemaValidationError
from soulspace.schemas.wellness_schemas import (
    AppendMoodResult,
    JournalEntry,
    LogSnapshot,
    MoodEntry,
)
from soulspace.services.storage_medium import KeyValueStorage
from soulspace.utils.clock import as_local, local_now, to_calendar_date
from soulspace.utils.errors import ValidationError
from soulspace.utils.wellness_constants import JOURNAL_ENTRIES_KEY, MOOD_LOG_KEY, MoodName

logger = logging.getLogger(__name__)


class LogStore:
    """
    Sole owner and writer of the mood log and the journal.

    Moods are kept newest calendar day first with at most one entry per day.
    Journals are kept newest-first by creation time.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        clock: Callable[[], datetime] = local_now,
        guest_id: Optional[str] = None,
    ):
        self.storage = storage
        self.clock = clock
        # Single namespace for now; uniqueness is not scoped per guest
        self.guest_id = guest_id
        self._write_lock = threading.Lock()

    # ---------------------- Raw access ----------------------

    def _read_records(self, key: str) -> list:
        raw = self.storage.get(key)
        if not raw:
            return []
        try:
            records = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"⚠️ Stored value for '{key}' is not valid JSON, treating as empty: {e}")
            return []
        if not isinstance(records, list):
            logger.error(f"⚠️ Stored value for '{key}' is not a list, treating as empty")
            return []
        return records

    def _write_records(self, key: str, records: list) -> None:
        self.storage.set(key, json.dumps(records, ensure_ascii=False))

    @staticmethod
    def _parse_moods(records: list) -> Tuple[List[MoodEntry], list]:
        moods, malformed = [], []
        for record in records:
            try:
                moods.append(MoodEntry.model_validate(record))
            except SchemaValidationError:
                logger.warning(f"⚠️ Skipping malformed mood record: {record!r}")
                malformed.append(record)
        return moods, malformed

    @staticmethod
    def _parse_journals(records: list) -> Tuple[List[JournalEntry], list]:
        journals, malformed = [], []
        for record in records:
            try:
                journals.append(JournalEntry.model_validate(record))
            except SchemaValidationError:
                logger.warning(f"⚠️ Skipping malformed journal record: {record!r}")
                malformed.append(record)
        return journals, malformed

    @staticmethod
    def _dump(entry) -> dict:
        return entry.model_dump(by_alias=True, mode="json")

    # ---------------------- Reads ----------------------

    def load_snapshot(self) -> LogSnapshot:
        with self._write_lock:
            moods, _ = self._parse_moods(self._read_records(MOOD_LOG_KEY))
            journals, _ = self._parse_journals(self._read_records(JOURNAL_ENTRIES_KEY))

        moods.sort(key=lambda m: m.calendar_date, reverse=True)
        journals.sort(key=lambda j: as_local(j.created_at), reverse=True)
        return LogSnapshot(moods=moods, journals=journals)

    def latest_journal(self) -> Optional[JournalEntry]:
        journals = self.load_snapshot().journals
        return journals[0] if journals else None

    # ---------------------- Writes ----------------------

    def append_mood(self, mood_name, on_date) -> AppendMoodResult:
        try:
            mood = mood_name if isinstance(mood_name, MoodName) else MoodName(mood_name)
        except ValueError:
            raise ValidationError(f"Unknown mood: {mood_name!r}")

        calendar_date: date = to_calendar_date(on_date)

        with self._write_lock:
            moods, malformed = self._parse_moods(self._read_records(MOOD_LOG_KEY))

            # ✅ One mood per calendar day
            if any(m.calendar_date == calendar_date for m in moods):
                logger.info(f"🔁 Mood already logged for {calendar_date}, skipping")
                return AppendMoodResult(recorded=False)

            entry = MoodEntry(mood_name=mood, calendar_date=calendar_date, logged_at=self.clock())
            moods.append(entry)
            moods.sort(key=lambda m: m.calendar_date, reverse=True)

            self._write_records(MOOD_LOG_KEY, [self._dump(m) for m in moods] + malformed)

        logger.info(f"🧠 Mood '{mood.value}' logged for {calendar_date}")
        return AppendMoodResult(recorded=True, entry=entry)

    def append_journal(self, text: str) -> JournalEntry:
        if text is None or not text.strip():
            raise ValidationError("Journal entry cannot be empty.")

        now = self.clock()
        entry = JournalEntry(text=text, created_at=now, calendar_date=to_calendar_date(now))

        with self._write_lock:
            records = self._read_records(JOURNAL_ENTRIES_KEY)
            self._write_records(JOURNAL_ENTRIES_KEY, [self._dump(entry)] + records)

        logger.info(f"📓 Journal entry saved for {entry.calendar_date}")
        return entry
