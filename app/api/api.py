from fastapi import APIRouter
from app.api.endpoints import auth, bookings

api_router = APIRouter()
api_router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

@api_router.get("/health", tags=["health"])
async def health_check():
    return {"status": "ok"}
