import logging
import uuid
from datetime import datetime, timezone

from app.core.errors import NotFoundError, PermissionDeniedError
from app.schemas.message import MessageInDB
from app.storage.base import Repository

logger = logging.getLogger(__name__)


def create_message(
    repo: Repository[MessageInDB],
    *,
    sender_id: str,
    sender_name: str,
    receiver_id: str,
    receiver_name: str,
    body: str,
    subject: str | None = None,
) -> MessageInDB:
    message = MessageInDB(
        id=uuid.uuid4().hex,
        sender_id=sender_id,
        sender_name=sender_name,
        receiver_id=receiver_id,
        receiver_name=receiver_name,
        subject=subject,
        body=body,
        read=False,
        created_at=datetime.now(timezone.utc),
    )
    with repo.locked():
        messages = repo.load_all()
        messages.append(message)
        repo.save_all(messages)
    logger.info(f"Message created: {message.id} | {sender_id} -> {receiver_id}")
    return message


def mark_read(
    repo: Repository[MessageInDB],
    message_id: str,
    *,
    reader_id: str | None = None,
) -> MessageInDB:
    """Flag a message as read. Marking an already read message is a no-op."""
    with repo.locked():
        messages = repo.load_all()
        message = next((m for m in messages if m.id == message_id), None)
        if message is None:
            logger.warning(f"Message not found: message_id={message_id}")
            raise NotFoundError("Message not found")
        if reader_id is not None and message.receiver_id != reader_id:
            raise PermissionDeniedError("Only the receiver can mark a message as read")
        if not message.read:
            message.read = True
            repo.save_all(messages)
    return message


def list_for_user(repo: Repository[MessageInDB], user_id: str) -> list[MessageInDB]:
    """Messages sent or received by the user, in storage order."""
    return [
        m
        for m in repo.load_all()
        if m.sender_id == user_id or m.receiver_id == user_id
    ]


def list_inbox(repo: Repository[MessageInDB], user_id: str) -> list[MessageInDB]:
    received = [m for m in repo.load_all() if m.receiver_id == user_id]
    return sorted(received, key=lambda m: m.created_at, reverse=True)


def unread_count(repo: Repository[MessageInDB], user_id: str) -> int:
    return sum(1 for m in repo.load_all() if m.receiver_id == user_id and not m.read)
