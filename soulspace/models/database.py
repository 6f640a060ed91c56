# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.

import os
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker

# ✅ Only load .env in local/dev
if os.environ.get("ENV") != "production":
    from dotenv import load_dotenv
    load_dotenv()

# ✅ Local device storage, SQLite file unless overridden
SQLALCHEMY_DATABASE_URL = os.getenv("SOULSPACE_DATABASE_URL", "sqlite:///./soulspace.db")


def build_engine(url: str):
    if url.startswith("sqlite"):
        # Sync FastAPI endpoints run in a worker pool
        return create_engine(url, connect_args={"check_same_thread": False})

    return create_engine(
        url,
        pool_size=5,
        max_overflow=5,
        pool_recycle=1800,     # Recycle every 30 mins
        pool_pre_ping=True     # Validate before using connection
    )


engine = build_engine(SQLALCHEMY_DATABASE_URL)

# ✅ Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ✅ Base model
Base = declarative_base()
