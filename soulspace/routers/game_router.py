# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter, Depends
from soulspace.routers.dependencies import get_companion
from soulspace.schemas.request_schemas import GuessRequest
from soulspace.services.companion import Companion
from soulspace.services.matching_game import MatchingGame

router = APIRouter(prefix="/game", tags=["Colour Harmony"])


def game_state(game: MatchingGame) -> dict:
    return {
        "phase": game.phase.value,
        "score": game.score,
        "time_left": game.time_left,
        "target": game.target,
        "options": game.options,
    }


@router.post("/start")
async def start_game(companion: Companion = Depends(get_companion)):
    companion.game.start_round()
    return game_state(companion.game)


@router.post("/guess")
async def guess(payload: GuessRequest, companion: Companion = Depends(get_companion)):
    correct = companion.game.submit_guess(payload.key)
    return {"correct": correct, **game_state(companion.game)}


@router.get("/state")
async def get_game_state(companion: Companion = Depends(get_companion)):
    return game_state(companion.game)


@router.post("/stop")
async def stop_game(companion: Companion = Depends(get_companion)):
    companion.game.stop()
    return game_state(companion.game)
