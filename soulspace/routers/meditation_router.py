# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter, Depends
from soulspace.routers.dependencies import get_companion
from soulspace.schemas.request_schemas import MeditationStartRequest
from soulspace.services.companion import Companion
from soulspace.utils.wellness_constants import MEDITATIONS

router = APIRouter(prefix="/meditation", tags=["Meditation"])

# Timer endpoints are async so they run on the loop that drives the ticks


@router.get("/library")
def meditation_library():
    return MEDITATIONS


@router.post("/start")
async def start_meditation(payload: MeditationStartRequest, companion: Companion = Depends(get_companion)):
    meditation = companion.meditation.begin(payload.title)
    return {"message": f"🧘 {meditation.title} started", "status": companion.meditation.status()}


@router.get("/status")
async def meditation_status(companion: Companion = Depends(get_companion)):
    return companion.meditation.status()


@router.post("/stop")
async def stop_meditation(companion: Companion = Depends(get_companion)):
    companion.meditation.close()
    return {"message": "Meditation stopped", "status": companion.meditation.status()}
