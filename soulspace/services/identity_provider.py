# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging
import uuid
from soulspace.services.storage_medium import KeyValueStorage
from soulspace.utils.wellness_constants import GUEST_ID_KEY

logger = logging.getLogger(__name__)


def ensure_identity(storage: KeyValueStorage) -> str:
    """
    Returns the device's anonymous guest id, creating and persisting one on
    first launch. StorageUnavailable propagates to the caller.
    """
    guest_id = storage.get(GUEST_ID_KEY)
    if guest_id:
        return guest_id

    guest_id = str(uuid.uuid4())
    storage.set(GUEST_ID_KEY, guest_id)
    logger.info(f"🆕 New anonymous guest created: {guest_id}")
    return guest_id
