from datetime import datetime

from pydantic import Field

from app.schemas.base import CamelModel, Envelope


class TrainerInDB(CamelModel):
    id: str
    user_id: str | None = None
    name: str
    specialties: list[str] = Field(default_factory=list)
    location: str = ""
    price_per_session: float = 0.0
    experience_years: int = 0
    bio: str = ""
    rating: float = 0.0
    review_count: int = 0
    avatar_url: str | None = None
    created_at: datetime


class TrainerUpdate(CamelModel):
    name: str = Field(min_length=2, max_length=50)
    specialties: list[str] = Field(min_length=1, max_length=5)
    location: str = Field(min_length=1)
    price_per_session: float = Field(ge=10, le=200)
    experience_years: int = Field(ge=0, le=50)
    bio: str = Field(min_length=20, max_length=300)
    avatar_url: str | None = None


class TrainerFilters(CamelModel):
    q: str | None = None
    location: str | None = None
    specialty: str | None = None
    min_price: float | None = Field(default=None, ge=0)
    max_price: float | None = Field(default=None, ge=0)
    min_rating: float | None = Field(default=None, ge=0, le=5)


class TrainerResponse(Envelope):
    trainer: TrainerInDB


class TrainerListResponse(Envelope):
    trainers: list[TrainerInDB]
