import logging
import uuid
from datetime import datetime, timezone

from app.core.errors import ConflictError, InvalidCredentialsError, NotFoundError
from app.core.security import get_password_hash, verify_password
from app.models.user import UserRole
from app.schemas.user import UserInDB
from app.storage.base import Repository

logger = logging.getLogger(__name__)


def _same_email(a: str, b: str) -> bool:
    return a.strip().lower() == b.strip().lower()


def find_by_email(repo: Repository[UserInDB], email: str) -> UserInDB | None:
    return next((u for u in repo.load_all() if _same_email(u.email, email)), None)


def register_user(
    repo: Repository[UserInDB],
    *,
    name: str,
    email: str,
    password: str,
    role: UserRole,
) -> UserInDB:
    with repo.locked():
        users = repo.load_all()
        if any(_same_email(u.email, email) for u in users):
            raise ConflictError("Email already registered")
        user = UserInDB(
            id=uuid.uuid4().hex,
            name=name,
            email=email,
            password_hash=get_password_hash(password),
            role=role,
            created_at=datetime.now(timezone.utc),
        )
        users.append(user)
        repo.save_all(users)
    logger.info(f"User registered: {user.id} | role={user.role.value}")
    return user


def authenticate(repo: Repository[UserInDB], email: str, password: str) -> UserInDB:
    user = find_by_email(repo, email)
    if not user or not verify_password(password, user.password_hash):
        raise InvalidCredentialsError()
    return user


def get_user(repo: Repository[UserInDB], user_id: str) -> UserInDB:
    user = next((u for u in repo.load_all() if u.id == user_id), None)
    if user is None:
        raise NotFoundError("User not found")
    return user
