from app.models.user import User
from app.models.trainer import Trainer
from app.models.booking import Booking
from app.models.message import Message

__all__ = [
    "User",
    "Trainer",
    "Booking",
    "Message",
]
