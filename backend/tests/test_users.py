import pytest

from app.core.errors import ConflictError, InvalidCredentialsError, NotFoundError
from app.models.user import UserRole
from app.services import users as users_service


def _register(repo, email="ana@example.com", role=UserRole.CLIENT):
    return users_service.register_user(
        repo, name="Ana", email=email, password="Supersecure1", role=role
    )


def test_password_is_stored_hashed(store):
    user = _register(store.users)

    assert user.password_hash != "Supersecure1"
    assert users_service.authenticate(store.users, "ana@example.com", "Supersecure1").id == user.id


def test_duplicate_email_is_rejected_without_changes(store):
    original = _register(store.users)

    with pytest.raises(ConflictError):
        _register(store.users, email="ANA@example.com", role=UserRole.TRAINER)

    users = store.users.load_all()
    assert len(users) == 1
    assert users[0] == original


def test_wrong_password_and_unknown_email(store):
    _register(store.users)

    with pytest.raises(InvalidCredentialsError):
        users_service.authenticate(store.users, "ana@example.com", "Wrongpass1")
    with pytest.raises(InvalidCredentialsError):
        users_service.authenticate(store.users, "nobody@example.com", "Supersecure1")


def test_get_user(store):
    user = _register(store.users)

    assert users_service.get_user(store.users, user.id).email == "ana@example.com"
    with pytest.raises(NotFoundError):
        users_service.get_user(store.users, "missing")
