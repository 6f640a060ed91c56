# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter, Depends, Request
from soulspace.routers.dependencies import get_companion
from soulspace.schemas.request_schemas import FeedPostRequest
from soulspace.services.companion import Companion
from soulspace.utils.rate_limit_utils import FEED_POST_RATE, limiter

router = APIRouter(prefix="/safe-space", tags=["Safe Space"])


@router.get("/posts")
def list_posts(companion: Companion = Depends(get_companion)):
    return companion.feed.list_posts()


@router.post("/post")
@limiter.limit(FEED_POST_RATE)
def create_post(request: Request, payload: FeedPostRequest, companion: Companion = Depends(get_companion)):
    post = companion.feed.add_post(payload.mood, payload.text)
    return {"message": "💬 Posted to Safe Space", "post": post}
