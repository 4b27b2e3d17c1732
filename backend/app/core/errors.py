"""Domain errors raised by services and storage.

Each error carries the HTTP status the API layer answers with; the handlers
in ``app.main`` turn them into the ``{"success": false, "error": ...}``
envelope.
"""

from fastapi import status


class MarketplaceError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(MarketplaceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class AuthenticationError(MarketplaceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"


class InvalidCredentialsError(AuthenticationError):
    default_message = "Incorrect email or password"


class PermissionDeniedError(MarketplaceError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not allowed"


class NotFoundError(MarketplaceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(MarketplaceError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class InvalidTransitionError(ConflictError):
    default_message = "Booking has already been decided"


class StorageError(MarketplaceError):
    default_message = "Storage unavailable"
