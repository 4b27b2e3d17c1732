import re
from datetime import datetime
from typing import Literal

from pydantic import AliasChoices, Field, field_validator

from app.schemas.base import CamelModel, Envelope

# Contact details must go through the platform, not the message body.
PERSONAL_DATA_PATTERN = re.compile(
    r"\b(tel[eé]fono|email|correo|m[oó]vil|direcci[oó]n|address)\b",
    re.IGNORECASE,
)


class MessageCreate(CamelModel):
    receiver_id: str = Field(min_length=1)
    receiver_name: str = Field(min_length=1)
    subject: str | None = Field(default=None, max_length=120)
    body: str = Field(min_length=10, max_length=500)

    @field_validator("body")
    @classmethod
    def reject_personal_data(cls, v: str) -> str:
        if PERSONAL_DATA_PATTERN.search(v):
            raise ValueError(
                "Do not include personal data such as an email or address in your message"
            )
        return v


class MessageInDB(CamelModel):
    id: str
    sender_id: str
    sender_name: str
    receiver_id: str
    receiver_name: str
    subject: str | None = None
    body: str
    read: bool = False
    created_at: datetime


class CreateMessageAction(CamelModel):
    action: Literal["create"]
    # The contact form posts the payload as "messageData".
    message: MessageCreate = Field(validation_alias=AliasChoices("message", "messageData"))


class MarkReadAction(CamelModel):
    action: Literal["mark_read"]
    message_id: str


class MessageResponse(Envelope):
    message: MessageInDB


class MessageListResponse(Envelope):
    messages: list[MessageInDB]
    unread_count: int = 0
