# FastAPI dependencies (database handle, user store, services)
# mflix_api/api/deps.py

import logging
from typing import AsyncGenerator, Optional

from fastapi import Depends, HTTPException, Request, status
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import ConnectionFailure

from mflix_api.core.config import settings
from mflix_api.data_access.user_store import UserStore

logger = logging.getLogger(__name__)

# --- Global Client (created once, reused by every request) ---
mongo_client: Optional[AsyncIOMotorClient] = None


def get_mongo_client() -> AsyncIOMotorClient:
    """Returns the process-wide Motor client, creating it on first use."""
    global mongo_client
    if mongo_client is None:
        logger.info(f"Creating MongoDB client for: {settings.MONGODB_URI.get_secret_value()[:15]}...") # Log partial URI safely
        mongo_client = AsyncIOMotorClient(settings.MONGODB_URI.get_secret_value())
    return mongo_client


async def initialize_connections():
    """
    Creates the MongoDB client and verifies the server is reachable.
    Called from the FastAPI lifespan on startup.
    """
    global mongo_client
    logger.info("Initializing external connections...")
    try:
        client = get_mongo_client()
        await client.admin.command('ping')
        logger.info(f"MongoDB client initialized successfully. Using database: '{settings.MONGODB_DB_NAME}'")
    except ConnectionFailure as e:
        logger.error(f"MongoDB connection failed during initialization: {e}", exc_info=True)
        mongo_client = None
    except Exception as e:
        logger.error(f"Unexpected error initializing MongoDB client: {e}", exc_info=True)
        mongo_client = None


async def close_connections():
    """Closes the MongoDB client. Called from the FastAPI lifespan on shutdown."""
    global mongo_client
    logger.info("Closing external connections...")
    if mongo_client:
        mongo_client.close()
        mongo_client = None
        logger.info("MongoDB client closed.")


# --- Database Dependency ---

async def get_db() -> AsyncGenerator[AsyncIOMotorDatabase, None]:
    """
    FastAPI dependency that yields the application's MongoDB database instance.

    Raises:
        HTTPException 503: If no client can be created.
    """
    try:
        client = get_mongo_client()
    except Exception as e:
        logger.critical(f"MongoDB client is not available: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database service not available.",
        )
    # Motor manages connection pooling internally
    yield client[settings.MONGODB_DB_NAME]


# --- User Store Dependency ---

def get_user_store(request: Request) -> UserStore:
    """Returns the account store attached to the running application."""
    return request.app.state.user_store


# --- Service Dependencies ---

def get_movie_service(db: AsyncIOMotorDatabase = Depends(get_db)):
    from mflix_api.services.movie_service import MovieService
    return MovieService(db=db)

def get_theater_service(db: AsyncIOMotorDatabase = Depends(get_db)):
    from mflix_api.services.theater_service import TheaterService
    return TheaterService(db=db)

def get_comment_service(db: AsyncIOMotorDatabase = Depends(get_db)):
    from mflix_api.services.comment_service import CommentService
    return CommentService(db=db)

def get_auth_service(user_store: UserStore = Depends(get_user_store)):
    from mflix_api.services.auth_service import AuthService
    return AuthService(user_store=user_store)
