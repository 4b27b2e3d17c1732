from fastapi import APIRouter

from app.api.routes import (
    auth,
    bookings,
    messages,
    trainers,
    users,
)


api_router = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/user", tags=["user"])
api_router.include_router(trainers.router, prefix="/trainers", tags=["trainers"])
api_router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
api_router.include_router(messages.router, prefix="/messages", tags=["messages"])
