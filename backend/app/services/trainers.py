"""Trainer directory: demo data, search and profile maintenance."""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from app.core.errors import NotFoundError
from app.schemas.trainer import TrainerFilters, TrainerInDB, TrainerUpdate
from app.schemas.user import UserInDB
from app.storage.base import Repository

logger = logging.getLogger(__name__)

DEFAULT_TRAINERS: list[dict[str, Any]] = [
    {
        "name": "Carlos Rodríguez",
        "specialties": ["Weight loss", "Strength"],
        "location": "Cáceres",
        "price_per_session": 35.0,
        "experience_years": 5,
        "rating": 4.8,
        "review_count": 24,
        "bio": "Body transformation and functional training specialist.",
        "avatar_url": "/fitness-trainer-man.png",
    },
    {
        "name": "María González",
        "specialties": ["Yoga", "Pilates"],
        "location": "Badajoz",
        "price_per_session": 30.0,
        "experience_years": 7,
        "rating": 4.9,
        "review_count": 31,
        "bio": "Certified yoga and pilates instructor with a holistic approach.",
        "avatar_url": "/yoga-instructor-woman.png",
    },
    {
        "name": "Javier Martín",
        "specialties": ["CrossFit", "Functional"],
        "location": "Cáceres",
        "price_per_session": 40.0,
        "experience_years": 4,
        "rating": 4.7,
        "review_count": 18,
        "bio": "Level 2 CrossFit coach focused on conditioning.",
        "avatar_url": "/crossfit-trainer-man.jpg",
    },
    {
        "name": "Ana Fernández",
        "specialties": ["Rehabilitation", "Seniors"],
        "location": "Mérida",
        "price_per_session": 32.0,
        "experience_years": 8,
        "rating": 4.9,
        "review_count": 27,
        "bio": "Physiotherapist and trainer specialised in sports rehabilitation.",
        "avatar_url": "/physiotherapy-trainer-woman.jpg",
    },
    {
        "name": "David López",
        "specialties": ["Boxing", "Self-defense"],
        "location": "Badajoz",
        "price_per_session": 38.0,
        "experience_years": 6,
        "rating": 4.6,
        "review_count": 15,
        "bio": "Boxing and martial arts coach with competitive experience.",
        "avatar_url": "/boxing-trainer-man.jpg",
    },
    {
        "name": "Laura Sánchez",
        "specialties": ["Sports nutrition", "Fitness"],
        "location": "Plasencia",
        "price_per_session": 35.0,
        "experience_years": 5,
        "rating": 4.8,
        "review_count": 22,
        "bio": "Sports nutritionist and certified personal trainer.",
        "avatar_url": "/nutrition-fitness-trainer-woman.jpg",
    },
]


def seed_default_trainers(repo: Repository[TrainerInDB]) -> list[TrainerInDB]:
    """Populate an empty directory with the demo profiles."""
    with repo.locked():
        existing = repo.load_all()
        if existing:
            return existing
        now = datetime.now(timezone.utc)
        trainers = [
            TrainerInDB(id=uuid.uuid4().hex, created_at=now, **data)
            for data in DEFAULT_TRAINERS
        ]
        repo.save_all(trainers)
    logger.info(f"Default trainers initialized: {len(trainers)}")
    return trainers


def _matches(trainer: TrainerInDB, filters: TrainerFilters) -> bool:
    specialties = [s.lower() for s in trainer.specialties]
    if filters.q:
        term = filters.q.strip().lower()
        if not (
            term in trainer.name.lower()
            or term in trainer.location.lower()
            or any(term in s for s in specialties)
        ):
            return False
    if filters.location and filters.location.strip().lower() not in trainer.location.lower():
        return False
    if filters.specialty and filters.specialty.strip().lower() not in specialties:
        return False
    if filters.min_price is not None and trainer.price_per_session < filters.min_price:
        return False
    if filters.max_price is not None and trainer.price_per_session > filters.max_price:
        return False
    if filters.min_rating is not None and trainer.rating < filters.min_rating:
        return False
    return True


def search_trainers(
    repo: Repository[TrainerInDB], filters: TrainerFilters | None = None
) -> list[TrainerInDB]:
    filters = filters or TrainerFilters()
    matches = [t for t in repo.load_all() if _matches(t, filters)]
    return sorted(matches, key=lambda t: t.rating, reverse=True)


def get_trainer(repo: Repository[TrainerInDB], trainer_id: str) -> TrainerInDB:
    trainer = next((t for t in repo.load_all() if t.id == trainer_id), None)
    if trainer is None:
        logger.warning(f"Trainer not found: trainer_id={trainer_id}")
        raise NotFoundError("Trainer not found")
    return trainer


def ensure_profile(repo: Repository[TrainerInDB], user: UserInDB) -> TrainerInDB:
    """Return the trainer user's profile, creating a blank one if needed."""
    with repo.locked():
        trainers = repo.load_all()
        profile = next((t for t in trainers if t.id == user.id), None)
        if profile is not None:
            return profile
        profile = TrainerInDB(
            id=user.id,
            user_id=user.id,
            name=user.name,
            created_at=datetime.now(timezone.utc),
        )
        trainers.append(profile)
        repo.save_all(trainers)
    logger.info(f"Trainer profile created: {profile.id}")
    return profile


def update_profile(
    repo: Repository[TrainerInDB], user: UserInDB, changes: TrainerUpdate
) -> TrainerInDB:
    ensure_profile(repo, user)
    with repo.locked():
        trainers = repo.load_all()
        profile = next(t for t in trainers if t.id == user.id)
        for key, value in changes.model_dump(exclude_unset=True).items():
            setattr(profile, key, value)
        repo.save_all(trainers)
    logger.info(f"Trainer profile updated: {profile.id}")
    return profile
