# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging
import random
from datetime import datetime
from typing import Callable, List, Optional
from pydantic import BaseModel
from soulspace.utils.clock import local_now
from soulspace.utils.errors import ValidationError
from soulspace.utils.wellness_constants import find_mood_option

logger = logging.getLogger(__name__)


class FeedPost(BaseModel):
    author: str
    mood: str
    text: str
    color: str
    icon: str
    posted_at: Optional[datetime] = None


SEED_POSTS = [
    FeedPost(author="KindSoul42", mood="😌 Calm", text="Just finished a great focus session. Feeling centered and ready for the week ahead! ✨", color="border-success", icon="😌"),
    FeedPost(author="PixelPanda", mood="😩 Stressed", text="Midterms are hitting hard. Anyone else feeling overwhelmed? Deep breaths...", color="border-danger", icon="😩"),
    FeedPost(author="Z_Gen_Vibes", mood="😊 Joyful", text="Logged a 7-day mood streak! Small wins matter! Celebrating with some comfy socks. 🥳", color="border-warning", icon="😊"),
]


class SafeSpaceFeed:
    """Local, in-memory community wall. Nothing here is persisted or shared."""

    def __init__(self, rng: Optional[random.Random] = None, clock: Callable[[], datetime] = local_now):
        self.rng = rng or random.Random()
        self.clock = clock
        self.posts: List[FeedPost] = list(SEED_POSTS)

    def list_posts(self) -> List[FeedPost]:
        return list(self.posts)

    def add_post(self, mood_name: str, text: str) -> FeedPost:
        option = find_mood_option(mood_name)
        if option is None:
            raise ValidationError(f"Unknown mood: {mood_name!r}")
        if text is None or not text.strip():
            raise ValidationError("Post text cannot be empty.")

        post = FeedPost(
            author=f"Guest_{self.rng.randrange(9999)}",
            mood=f"{option.emoji} {option.name.value}",
            text=text.strip(),
            color=option.color_class.replace("-subtle", "").replace("bg-", "border-"),
            icon=option.emoji,
            posted_at=self.clock(),
        )
        self.posts.insert(0, post)
        logger.info(f"💬 New Safe Space post by {post.author}")
        return post
