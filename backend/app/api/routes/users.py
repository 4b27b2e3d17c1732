from fastapi import APIRouter, Depends, Query

from app.api import deps
from app.schemas.booking import ActiveBookingResponse
from app.schemas.user import UserInDB
from app.services import bookings as bookings_service
from app.storage import Store

router = APIRouter()


@router.get("/active-booking", response_model=ActiveBookingResponse)
def get_active_booking(
    user_id: str | None = Query(default=None, alias="userId"),
    store: Store = Depends(deps.get_store),  # noqa: B008
    current_user: UserInDB = Depends(deps.get_current_user),  # noqa: B008
) -> ActiveBookingResponse:
    """Whether the client has an accepted booking, i.e. an active trainer."""
    user_id = deps.resolve_user_id(user_id, current_user)
    active, booking = bookings_service.has_active_booking(store.bookings, user_id)
    return ActiveBookingResponse(has_active_booking=active, booking=booking)
