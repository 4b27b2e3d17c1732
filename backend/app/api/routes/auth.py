from fastapi import APIRouter, Depends, status

from app.api import deps
from app.core.security import create_access_token
from app.models.user import UserRole
from app.schemas import auth as auth_schema
from app.schemas.user import UserInDB, UserPublic, UserResponse
from app.services import trainers as trainers_service
from app.services import users as users_service
from app.storage import Store

router = APIRouter()


def _public(user: UserInDB) -> UserPublic:
    return UserPublic.model_validate(user.model_dump(exclude={"password_hash"}))


def _auth_response(user: UserInDB) -> auth_schema.AuthResponse:
    return auth_schema.AuthResponse(
        user=_public(user),
        access_token=create_access_token(user.id),
    )


@router.post(
    "/register",
    response_model=auth_schema.AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_user(
    payload: auth_schema.RegisterRequest,
    store: Store = Depends(deps.get_store),  # noqa: B008
) -> auth_schema.AuthResponse:
    user = users_service.register_user(
        store.users,
        name=payload.name,
        email=payload.email,
        password=payload.password,
        role=payload.role,
    )
    if user.role == UserRole.TRAINER:
        trainers_service.ensure_profile(store.trainers, user)
    return _auth_response(user)


@router.post("/login", response_model=auth_schema.AuthResponse)
def login_user(
    payload: auth_schema.LoginRequest,
    store: Store = Depends(deps.get_store),  # noqa: B008
) -> auth_schema.AuthResponse:
    user = users_service.authenticate(store.users, payload.email, payload.password)
    return _auth_response(user)


@router.get("/me", response_model=UserResponse)
def read_current_user(
    current_user: UserInDB = Depends(deps.get_current_user),  # noqa: B008
) -> UserResponse:
    return UserResponse(user=_public(current_user))
