# reset_db.py
from soulspace.models import database  # Make sure this imports your Base
from soulspace.models import StorageEntry  # registers the table
from soulspace.models.database import engine

if __name__ == "__main__":
    print("⚠️ Dropping local wellness storage (guest id, moods, journal)...")
    database.Base.metadata.drop_all(bind=engine)

    print("✅ Recreating tables from models...")
    database.Base.metadata.create_all(bind=engine)

    print("✅ Local data reset complete.")
