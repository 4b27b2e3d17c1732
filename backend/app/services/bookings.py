"""Booking lifecycle: creation, trainer decisions and role-scoped queries."""

import logging
import uuid
from datetime import datetime, timezone

from app.core.errors import (
    InvalidTransitionError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from app.models.booking import BookingStatus, SessionType
from app.models.user import UserRole
from app.schemas.booking import BookingInDB
from app.storage.base import Repository

logger = logging.getLogger(__name__)

DECISION_STATUSES = {BookingStatus.ACCEPTED, BookingStatus.REJECTED}


def create_booking(
    repo: Repository[BookingInDB],
    *,
    client_id: str,
    client_name: str,
    trainer_id: str,
    trainer_name: str,
    date: str,
    time: str,
    session_type: SessionType,
    price: float,
    notes: str | None = None,
) -> BookingInDB:
    """Record a new pending booking request.

    Client and trainer names are copied onto the booking as they are now;
    later profile edits do not change existing bookings. Overlapping
    requests for the same trainer slot are accepted.
    """
    booking = BookingInDB(
        id=uuid.uuid4().hex,
        client_id=client_id,
        client_name=client_name,
        trainer_id=trainer_id,
        trainer_name=trainer_name,
        date=date,
        time=time,
        session_type=session_type,
        notes=notes,
        price=price,
        status=BookingStatus.PENDING,
        created_at=datetime.now(timezone.utc),
    )
    with repo.locked():
        bookings = repo.load_all()
        bookings.append(booking)
        repo.save_all(bookings)
    logger.info(f"Booking created: {booking.id} | client={client_id} trainer={trainer_id}")
    return booking


def get_booking(repo: Repository[BookingInDB], booking_id: str) -> BookingInDB:
    for booking in repo.load_all():
        if booking.id == booking_id:
            return booking
    logger.warning(f"Booking not found: booking_id={booking_id}")
    raise NotFoundError("Booking not found")


def update_status(
    repo: Repository[BookingInDB],
    booking_id: str,
    status: BookingStatus,
    *,
    actor_id: str | None = None,
    enforce_terminal: bool = False,
) -> BookingInDB:
    """Accept or reject a booking.

    ``actor_id`` is the user making the decision; when given it must be the
    booking's trainer. With ``enforce_terminal`` a booking that is no longer
    pending cannot be decided again, otherwise the new status overwrites the
    old one.
    """
    try:
        status = BookingStatus(status)
    except ValueError as exc:
        raise ValidationError(f"Unknown booking status: {status}") from exc
    if status not in DECISION_STATUSES:
        raise ValidationError("Status must be 'accepted' or 'rejected'")

    with repo.locked():
        bookings = repo.load_all()
        booking = next((b for b in bookings if b.id == booking_id), None)
        if booking is None:
            logger.warning(f"Booking not found for status update: booking_id={booking_id}")
            raise NotFoundError("Booking not found")
        if actor_id is not None and booking.trainer_id != actor_id:
            logger.warning(
                f"Status update denied: booking_id={booking_id}, actor_id={actor_id}"
            )
            raise PermissionDeniedError("Only the booked trainer can update this booking")
        if enforce_terminal and booking.status != BookingStatus.PENDING:
            raise InvalidTransitionError(
                f"Booking is already {booking.status.value}"
            )
        booking.status = status
        repo.save_all(bookings)

    logger.info(f"Booking status updated: {booking_id} -> {status.value}")
    return booking


def list_for_user(
    repo: Repository[BookingInDB],
    user_id: str,
    role: UserRole = UserRole.CLIENT,
) -> list[BookingInDB]:
    bookings = repo.load_all()
    if role == UserRole.TRAINER:
        return [b for b in bookings if b.trainer_id == user_id]
    return [b for b in bookings if b.client_id == user_id]


def find_active_booking(
    repo: Repository[BookingInDB], client_id: str
) -> BookingInDB | None:
    """Return the client's first accepted booking in storage order."""
    return next(
        (
            b
            for b in repo.load_all()
            if b.client_id == client_id and b.status == BookingStatus.ACCEPTED
        ),
        None,
    )


def has_active_booking(
    repo: Repository[BookingInDB], client_id: str
) -> tuple[bool, BookingInDB | None]:
    booking = find_active_booking(repo, client_id)
    return booking is not None, booking
