"""Persistence backends for users, trainer profiles, bookings and messages."""

from dataclasses import dataclass

from app.core.config import Settings
from app.schemas.booking import BookingInDB
from app.schemas.message import MessageInDB
from app.schemas.trainer import TrainerInDB
from app.schemas.user import UserInDB
from app.storage.base import Repository
from app.storage.file import JsonFileRepository


@dataclass
class Store:
    users: Repository[UserInDB]
    trainers: Repository[TrainerInDB]
    bookings: Repository[BookingInDB]
    messages: Repository[MessageInDB]


def build_file_store(data_dir) -> Store:
    return Store(
        users=JsonFileRepository(data_dir / "users.json", UserInDB),
        trainers=JsonFileRepository(data_dir / "trainers.json", TrainerInDB),
        bookings=JsonFileRepository(data_dir / "bookings.json", BookingInDB),
        messages=JsonFileRepository(data_dir / "messages.json", MessageInDB),
    )


def build_database_store(session_factory) -> Store:
    from app import models
    from app.storage.database import SqlRepository

    return Store(
        users=SqlRepository(session_factory, models.User, UserInDB),
        trainers=SqlRepository(session_factory, models.Trainer, TrainerInDB),
        bookings=SqlRepository(session_factory, models.Booking, BookingInDB),
        messages=SqlRepository(session_factory, models.Message, MessageInDB),
    )


def build_store(settings: Settings) -> Store:
    if settings.storage_backend == "database":
        # Imported lazily so file mode never creates an engine.
        from app.db.session import SessionLocal

        return build_database_store(SessionLocal)
    return build_file_store(settings.data_dir)


__all__ = [
    "Repository",
    "JsonFileRepository",
    "Store",
    "build_store",
    "build_file_store",
    "build_database_store",
]
