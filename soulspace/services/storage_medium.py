# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional
from cryptography.fernet import InvalidToken
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from soulspace.models.storage_entry import StorageEntry
from soulspace.utils.errors import StorageUnavailable

logger = logging.getLogger(__name__)


class KeyValueStorage(ABC):
    """Local key/value medium the core persists into."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...


class SqlKeyValueStorage(KeyValueStorage):
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        db: Session = self.session_factory()
        try:
            entry = db.get(StorageEntry, key)
            return entry.value if entry else None
        except (SQLAlchemyError, InvalidToken, EnvironmentError, ValueError) as e:
            logger.error(f"🛑 Storage read failed for '{key}': {e}", exc_info=True)
            raise StorageUnavailable(f"Could not read '{key}'") from e
        finally:
            db.close()

    def set(self, key: str, value: str) -> None:
        db: Session = self.session_factory()
        try:
            entry = db.get(StorageEntry, key)
            if entry:
                entry.value = value
            else:
                db.add(StorageEntry(key=key, value=value))
            db.commit()
        except (SQLAlchemyError, InvalidToken, EnvironmentError, ValueError) as e:
            db.rollback()
            logger.error(f"🛑 Storage write failed for '{key}': {e}", exc_info=True)
            raise StorageUnavailable(f"Could not write '{key}'") from e
        finally:
            db.close()


class InMemoryStorage(KeyValueStorage):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value
