from pydantic import AliasChoices, EmailStr, Field, field_validator

from app.models.user import UserRole
from app.schemas.base import CamelModel, Envelope
from app.schemas.user import UserPublic


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


class RegisterRequest(CamelModel):
    name: str = Field(min_length=2, max_length=50)
    email: EmailStr
    password: str = Field(min_length=8, max_length=100)
    # The signup form posts the role as "userType".
    role: UserRole = Field(validation_alias=AliasChoices("role", "userType"))

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not all(ch.isalpha() or ch.isspace() for ch in v):
            raise ValueError("Name may only contain letters and spaces")
        return v

    @field_validator("password")
    @classmethod
    def validate_password_strength(cls, v: str) -> str:
        if not (
            any(ch.islower() for ch in v)
            and any(ch.isupper() for ch in v)
            and any(ch.isdigit() for ch in v)
        ):
            raise ValueError(
                "Password must contain a lowercase letter, an uppercase letter and a digit"
            )
        return v


class AuthResponse(Envelope):
    user: UserPublic
    access_token: str
    token_type: str = "bearer"
