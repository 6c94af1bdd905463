"""Main API router that includes all endpoint routers."""

from fastapi import APIRouter

from app.api.v1 import auth, booking

api_router = APIRouter()

# Authentication
api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])

# Bookings
api_router.include_router(booking.router, prefix="/booking", tags=["Bookings"])
