from typing import Annotated, Literal, Union

from fastapi import APIRouter, Body, Depends, Query, Response, status

from app.api import deps
from app.schemas.message import (
    CreateMessageAction,
    MarkReadAction,
    MessageListResponse,
    MessageResponse,
)
from app.schemas.user import UserInDB
from app.services import messages as messages_service
from app.storage import Store

router = APIRouter()

MessageAction = Annotated[
    Union[CreateMessageAction, MarkReadAction],
    Body(discriminator="action"),
]


@router.post("", response_model=MessageResponse)
def post_message(
    payload: MessageAction,
    response: Response,
    store: Store = Depends(deps.get_store),  # noqa: B008
    current_user: UserInDB = Depends(deps.get_current_user),  # noqa: B008
) -> MessageResponse:
    if isinstance(payload, MarkReadAction):
        message = messages_service.mark_read(
            store.messages, payload.message_id, reader_id=current_user.id
        )
        return MessageResponse(message=message)

    data = payload.message
    message = messages_service.create_message(
        store.messages,
        sender_id=current_user.id,
        sender_name=current_user.name,
        receiver_id=data.receiver_id,
        receiver_name=data.receiver_name,
        subject=data.subject,
        body=data.body,
    )
    response.status_code = status.HTTP_201_CREATED
    return MessageResponse(message=message)


@router.get("", response_model=MessageListResponse)
def list_messages(
    user_id: str | None = Query(default=None, alias="userId"),
    box: Literal["all", "inbox"] = Query(default="all"),
    store: Store = Depends(deps.get_store),  # noqa: B008
    current_user: UserInDB = Depends(deps.get_current_user),  # noqa: B008
) -> MessageListResponse:
    user_id = deps.resolve_user_id(user_id, current_user)
    if box == "inbox":
        messages = messages_service.list_inbox(store.messages, user_id)
    else:
        messages = messages_service.list_for_user(store.messages, user_id)
    return MessageListResponse(
        messages=messages,
        unread_count=messages_service.unread_count(store.messages, user_id),
    )
