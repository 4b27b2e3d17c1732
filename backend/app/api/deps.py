from functools import lru_cache

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import get_settings
from app.core.errors import AuthenticationError, NotFoundError, PermissionDeniedError
from app.core.security import decode_token
from app.models.user import UserRole
from app.schemas.user import UserInDB
from app.services import trainers as trainers_service
from app.services import users as users_service
from app.storage import Store, build_store

bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache
def get_store() -> Store:
    settings = get_settings()
    store = build_store(settings)
    if settings.seed_default_trainers:
        trainers_service.seed_default_trainers(store.trainers)
    return store


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),  # noqa: B008
    store: Store = Depends(get_store),  # noqa: B008
) -> UserInDB:
    if credentials is None:
        raise AuthenticationError("Not authenticated")
    try:
        data = decode_token(credentials.credentials)
        if data.get("type") != "access":
            raise ValueError("Invalid access token")
        user_id = str(data["sub"])
    except (ValueError, KeyError) as exc:
        raise AuthenticationError("Invalid access token") from exc
    try:
        return users_service.get_user(store.users, user_id)
    except NotFoundError as exc:
        raise AuthenticationError("User not found") from exc


def get_current_trainer(
    current_user: UserInDB = Depends(get_current_user),  # noqa: B008
) -> UserInDB:
    if current_user.role != UserRole.TRAINER:
        raise PermissionDeniedError("Only trainers can do this")
    return current_user


def resolve_user_id(requested: str | None, current_user: UserInDB) -> str:
    """Default a ``userId`` query parameter to the caller and refuse other users."""
    if requested is not None and requested != current_user.id:
        raise PermissionDeniedError("You can only access your own data")
    return current_user.id
