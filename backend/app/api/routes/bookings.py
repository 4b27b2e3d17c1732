from typing import Annotated, Union

from fastapi import APIRouter, Body, Depends, Query, Response, status

from app.api import deps
from app.core.config import get_settings
from app.core.errors import PermissionDeniedError
from app.models.user import UserRole
from app.schemas.booking import (
    BookingListResponse,
    BookingResponse,
    CreateBookingAction,
    UpdateStatusAction,
)
from app.schemas.user import UserInDB
from app.services import bookings as bookings_service
from app.services import trainers as trainers_service
from app.storage import Store

router = APIRouter()

BookingAction = Annotated[
    Union[CreateBookingAction, UpdateStatusAction],
    Body(discriminator="action"),
]


def _create(
    payload: CreateBookingAction, store: Store, current_user: UserInDB
) -> BookingResponse:
    if current_user.role != UserRole.CLIENT:
        raise PermissionDeniedError("Only clients can book sessions")
    data = payload.booking
    trainer = trainers_service.get_trainer(store.trainers, data.trainer_id)
    booking = bookings_service.create_booking(
        store.bookings,
        client_id=current_user.id,
        client_name=current_user.name,
        trainer_id=trainer.id,
        trainer_name=data.trainer_name or trainer.name,
        date=data.date,
        time=data.time,
        session_type=data.session_type,
        notes=data.notes,
        price=data.price,
    )
    return BookingResponse(booking=booking)


@router.post("", response_model=BookingResponse)
def post_booking(
    payload: BookingAction,
    response: Response,
    store: Store = Depends(deps.get_store),  # noqa: B008
    current_user: UserInDB = Depends(deps.get_current_user),  # noqa: B008
) -> BookingResponse:
    if isinstance(payload, CreateBookingAction):
        response.status_code = status.HTTP_201_CREATED
        return _create(payload, store, current_user)

    booking = bookings_service.update_status(
        store.bookings,
        payload.id,
        payload.status,
        actor_id=current_user.id,
        enforce_terminal=get_settings().enforce_terminal_status,
    )
    return BookingResponse(booking=booking)


@router.get("", response_model=BookingListResponse)
def list_bookings(
    user_id: str | None = Query(default=None, alias="userId"),
    role: UserRole = Query(default=UserRole.CLIENT),
    store: Store = Depends(deps.get_store),  # noqa: B008
    current_user: UserInDB = Depends(deps.get_current_user),  # noqa: B008
) -> BookingListResponse:
    user_id = deps.resolve_user_id(user_id, current_user)
    return BookingListResponse(
        bookings=bookings_service.list_for_user(store.bookings, user_id, role)
    )
