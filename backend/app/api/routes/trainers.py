from fastapi import APIRouter, Depends, Query

from app.api import deps
from app.schemas.trainer import (
    TrainerFilters,
    TrainerListResponse,
    TrainerResponse,
    TrainerUpdate,
)
from app.schemas.user import UserInDB
from app.services import trainers as trainers_service
from app.storage import Store

router = APIRouter()


@router.get("", response_model=TrainerListResponse)
def list_trainers(
    q: str | None = Query(default=None),
    location: str | None = Query(default=None),
    specialty: str | None = Query(default=None),
    min_price: float | None = Query(default=None, alias="minPrice", ge=0),
    max_price: float | None = Query(default=None, alias="maxPrice", ge=0),
    min_rating: float | None = Query(default=None, alias="minRating", ge=0, le=5),
    store: Store = Depends(deps.get_store),  # noqa: B008
) -> TrainerListResponse:
    filters = TrainerFilters(
        q=q,
        location=location,
        specialty=specialty,
        min_price=min_price,
        max_price=max_price,
        min_rating=min_rating,
    )
    return TrainerListResponse(
        trainers=trainers_service.search_trainers(store.trainers, filters)
    )


@router.put("/me", response_model=TrainerResponse)
def update_my_profile(
    payload: TrainerUpdate,
    store: Store = Depends(deps.get_store),  # noqa: B008
    current_user: UserInDB = Depends(deps.get_current_trainer),  # noqa: B008
) -> TrainerResponse:
    trainer = trainers_service.update_profile(store.trainers, current_user, payload)
    return TrainerResponse(trainer=trainer)


@router.get("/{trainer_id}", response_model=TrainerResponse)
def get_trainer(
    trainer_id: str,
    store: Store = Depends(deps.get_store),  # noqa: B008
) -> TrainerResponse:
    return TrainerResponse(trainer=trainers_service.get_trainer(store.trainers, trainer_id))
