# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter, Depends
from soulspace.routers.dependencies import get_companion
from soulspace.services.companion import Companion

router = APIRouter(prefix="/guest", tags=["Guest Session"])


@router.get("/session")
def guest_session(companion: Companion = Depends(get_companion)):
    return {"guest_id": companion.guest_id}
