from datetime import datetime
from typing import Literal

from pydantic import AliasChoices, Field, field_validator

from app.models.booking import BookingStatus, SessionType
from app.schemas.base import CamelModel, Envelope, validate_date_string, validate_time_string


class BookingCreate(CamelModel):
    trainer_id: str = Field(min_length=1)
    trainer_name: str | None = None
    date: str
    time: str
    # The booking form posts the session type as "type".
    session_type: SessionType = Field(validation_alias=AliasChoices("sessionType", "type"))
    notes: str | None = Field(default=None, max_length=200)
    price: float = Field(ge=0)

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        return validate_date_string(v)

    @field_validator("time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        return validate_time_string(v)


class BookingInDB(CamelModel):
    id: str
    client_id: str
    client_name: str
    trainer_id: str
    trainer_name: str
    date: str
    time: str
    session_type: SessionType
    notes: str | None = None
    price: float
    status: BookingStatus = BookingStatus.PENDING
    created_at: datetime


class CreateBookingAction(CamelModel):
    action: Literal["create"]
    booking: BookingCreate


class UpdateStatusAction(CamelModel):
    action: Literal["update_status"]
    id: str
    status: BookingStatus


class BookingResponse(Envelope):
    booking: BookingInDB


class BookingListResponse(Envelope):
    bookings: list[BookingInDB]


class ActiveBookingResponse(Envelope):
    has_active_booking: bool
    booking: BookingInDB | None = None
