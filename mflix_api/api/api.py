"""
API Router Module - Aggregates all endpoint routers
"""
from fastapi import APIRouter

from mflix_api.api.endpoints import auth, comments, health, movies, theaters

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["Health"])
api_router.include_router(auth.router, prefix="/auth", tags=["Auth"])
# Theaters live under /movies and must be registered before /movies/{movie_id}
api_router.include_router(theaters.router, prefix="/movies/theaters", tags=["Theaters"])
api_router.include_router(comments.router, prefix="/movies/{movie_id}/comments", tags=["Comments"])
api_router.include_router(movies.router, prefix="/movies", tags=["Movies"])
