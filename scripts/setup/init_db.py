"""
Initialize the gate-pass store by seeding the demo users.
Run once before first launch. Existing users are left untouched.
Usage: python scripts/setup/init_db.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from gatepass.config import settings
from gatepass.database import get_store
from gatepass.schemas.user import User
from gatepass.utils.exceptions import StorageError

SEED_USERS = [
    User(id="1", username="student1", password="student123", role="student", name="Student One"),
    User(id="2", username="moderator1", password="moderator123", role="moderator", name="Moderator One"),
    User(id="3", username="gatekeeper1", password="gatekeeper123", role="gatekeeper", name="Gatekeeper One"),
]


def main():
    print("Gate-Pass store initialization")
    print("=" * 40)
    target = settings.DATABASE_FILE if settings.STORAGE_BACKEND == "json" else settings.DATABASE_URL
    print(f"Storage: {settings.STORAGE_BACKEND} → {target}")

    store = get_store()
    try:
        with store.lock:
            snapshot = store.load()
            if snapshot.users:
                print(f"Store already has {len(snapshot.users)} user(s), nothing to seed")
            else:
                snapshot.users.extend(SEED_USERS)
                store.save(snapshot)
                print(f"Seeded {len(SEED_USERS)} users")
    except StorageError as e:
        print(f"Cannot initialize store: {e}")
        sys.exit(1)

    print(f"\nUsers ({len(snapshot.users)} total):")
    for u in snapshot.users:
        print(f"   {u.username:<14} {u.role}")
    print(f"Passes: {len(snapshot.passes)}")

    print("\nStore ready! You can now start the backend:")
    print(f"   uvicorn gatepass.main:app --host {settings.BACKEND_IP} --port {settings.BACKEND_PORT} --reload")


if __name__ == "__main__":
    main()
