"""Startup script for production deployment.

In database mode: on a fresh database (no tables), creates all tables from
models and stamps Alembic to head; on an existing database, runs Alembic
migrations normally. In both modes the demo trainer profiles are seeded
into an empty directory.
"""

import subprocess
import sys

from sqlalchemy import inspect

from app.core.config import get_settings
from app.services.trainers import seed_default_trainers
from app.storage import build_store


def migrate_database() -> None:
    from app.db.base import Base
    from app.db.session import engine
    from app import models  # noqa: F401

    inspector = inspect(engine)
    tables = inspector.get_table_names()

    if "users" not in tables:
        print("Fresh database detected, creating all tables...")
        Base.metadata.create_all(bind=engine)
        print("Tables created. Stamping Alembic to head...")
        subprocess.check_call([sys.executable, "-m", "alembic", "stamp", "head"])
        print("Done.")
    else:
        print("Existing database, running migrations...")
        subprocess.check_call([sys.executable, "-m", "alembic", "upgrade", "head"])
        print("Migrations complete.")


def main():
    settings = get_settings()
    if settings.storage_backend == "database":
        migrate_database()
    if settings.seed_default_trainers:
        trainers = seed_default_trainers(build_store(settings).trainers)
        print(f"Trainer directory ready ({len(trainers)} profiles).")


if __name__ == "__main__":
    main()
