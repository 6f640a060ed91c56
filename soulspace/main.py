# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging
import os
from contextlib import asynccontextmanager

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from soulspace.models import database
from soulspace.models import *  # registers all models
from soulspace.models.database import SessionLocal

from soulspace.routers import guest_router, mood_router, journal_router
from soulspace.routers import meditation_router, game_router, safe_space_router

from soulspace.services.companion import Companion
from soulspace.services.storage_medium import SqlKeyValueStorage
from soulspace.utils.errors import StorageUnavailable, ValidationError
from soulspace.utils.rate_limit_utils import limiter
from soulspace.utils.schedulers.tick_scheduler import ApschedulerTickScheduler

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create DB tables in one go
    database.Base.metadata.create_all(bind=database.engine)

    # ⏱️ Drives meditation and game countdowns on this loop
    scheduler = AsyncIOScheduler(job_defaults={"misfire_grace_time": None})
    scheduler.start()

    app.state.companion = Companion(
        storage=SqlKeyValueStorage(SessionLocal),
        scheduler=ApschedulerTickScheduler(scheduler),
    )
    yield
    app.state.companion.shutdown()
    scheduler.shutdown(wait=False)


app = FastAPI(
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    title="SoulSpace Wellness Companion API",
    description="Local guest session, mood & journal log, meditation and mini-game",
    version="1.0"
)

app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)

# Include routers
app.include_router(guest_router.router)
app.include_router(mood_router.router)
app.include_router(journal_router.router)
app.include_router(meditation_router.router)
app.include_router(game_router.router)
app.include_router(safe_space_router.router)


# ---------------------- ADDING EXCEPTION HANDLERS ----------------------
@app.exception_handler(RateLimitExceeded)
async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"detail": "Too many requests. Please slow down."}
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(StorageUnavailable)
async def storage_unavailable_handler(request: Request, exc: StorageUnavailable):
    logger.error(f"🛑 Storage unavailable on {request.url.path}: {exc}")
    return JSONResponse(status_code=503, content={"detail": "Local storage is unavailable."})


@app.get("/")
def read_root():
    return {"message": "Welcome to SoulSpace - your wellness companion backend"}


@app.get("/health", tags=["Infra"])
def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    # Device-local only
    uvicorn.run(app, host="127.0.0.1", port=int(os.getenv("PORT", 8000)))
