from datetime import datetime

from pydantic import EmailStr

from app.models.user import UserRole
from app.schemas.base import CamelModel, Envelope


class UserBase(CamelModel):
    name: str
    email: EmailStr
    role: UserRole = UserRole.CLIENT


class UserInDB(UserBase):
    id: str
    password_hash: str
    created_at: datetime


class UserPublic(UserBase):
    id: str
    created_at: datetime


class UserResponse(Envelope):
    user: UserPublic
