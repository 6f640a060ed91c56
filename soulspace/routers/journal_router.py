# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter, Depends, Query
from soulspace.routers.dependencies import get_companion
from soulspace.schemas.request_schemas import JournalAddRequest
from soulspace.services.companion import Companion

router = APIRouter(prefix="/journal", tags=["Daily Journal"])


@router.post("/add")
def add_journal(payload: JournalAddRequest, companion: Companion = Depends(get_companion)):
    entry = companion.log_store.append_journal(payload.text)
    return {"message": "Journal entry saved successfully!", "entry": entry}


@router.get("/list")
def list_journal(limit: int = Query(20, ge=1), companion: Companion = Depends(get_companion)):
    return companion.log_store.load_snapshot().journals[:limit]


@router.get("/latest")
def latest_journal(companion: Companion = Depends(get_companion)):
    return {"entry": companion.log_store.latest_journal()}
