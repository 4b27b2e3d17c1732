import pytest

from app.core.errors import NotFoundError
from app.models.user import UserRole
from app.schemas.trainer import TrainerFilters, TrainerUpdate
from app.services import trainers as trainers_service
from app.services import users as users_service
from app.services.trainers import DEFAULT_TRAINERS


def test_seed_only_fills_empty_directory(store):
    seeded = trainers_service.seed_default_trainers(store.trainers)
    again = trainers_service.seed_default_trainers(store.trainers)

    assert len(seeded) == len(DEFAULT_TRAINERS)
    assert [t.id for t in again] == [t.id for t in seeded]
    assert len(store.trainers.load_all()) == len(DEFAULT_TRAINERS)


def test_search_sorted_by_rating(store):
    trainers_service.seed_default_trainers(store.trainers)

    ratings = [t.rating for t in trainers_service.search_trainers(store.trainers)]

    assert ratings == sorted(ratings, reverse=True)


def test_search_free_text_matches_name_location_and_specialty(store):
    trainers_service.seed_default_trainers(store.trainers)

    def names(**kwargs):
        found = trainers_service.search_trainers(store.trainers, TrainerFilters(**kwargs))
        return {t.name for t in found}

    assert names(q="cáceres") == {"Carlos Rodríguez", "Javier Martín"}
    assert names(q="yoga") == {"María González"}
    assert names(q="laura") == {"Laura Sánchez"}
    assert names(specialty="boxing") == {"David López"}
    assert names(min_price=36, max_price=40) == {"Javier Martín", "David López"}
    assert names(location="badajoz", min_rating=4.8) == {"María González"}


def test_profile_for_trainer_user(store):
    user = users_service.register_user(
        store.users, name="Pablo", email="pablo@example.com", password="Supersecure1", role=UserRole.TRAINER
    )
    profile = trainers_service.ensure_profile(store.trainers, user)
    assert profile.id == user.id
    assert trainers_service.ensure_profile(store.trainers, user).id == profile.id

    updated = trainers_service.update_profile(
        store.trainers,
        user,
        TrainerUpdate(
            name="Pablo Ruiz",
            specialties=["Running"],
            location="Cáceres",
            price_per_session=25,
            experience_years=3,
            bio="Endurance coach for runners of every level.",
        ),
    )

    assert updated.name == "Pablo Ruiz"
    assert trainers_service.get_trainer(store.trainers, user.id).price_per_session == 25
    with pytest.raises(NotFoundError):
        trainers_service.get_trainer(store.trainers, "missing")
