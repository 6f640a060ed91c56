# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, String, DateTime
from datetime import datetime
from soulspace.models.database import Base
from soulspace.utils.encryption import EncryptedTypeHybrid  # 🔐 Encryption utils

class StorageEntry(Base):
    __tablename__ = "storage_entries"

    key = Column(String, primary_key=True, index=True)
    value = Column(EncryptedTypeHybrid, nullable=False)  # 🔐 Encrypted
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
