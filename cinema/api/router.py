"""Main API router for DDD architecture"""

from fastapi import APIRouter

from .routes import auth, users, purchases, movies

# Main API router
api_router = APIRouter()

# Include all routes
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(purchases.router, prefix="/purchases", tags=["purchases"])
api_router.include_router(movies.router, prefix="/movies", tags=["movies"])
