# mflix_api/services/movie_service.py

import logging
from typing import Any, Dict, List

from motor.motor_asyncio import AsyncIOMotorDatabase

from mflix_api.data_access.mongo_client import MovieRepository
from mflix_api.services.document_service import DocumentService

logger = logging.getLogger(__name__)

# Listing has no pagination; it never returns more than this many movies
MOVIE_LIST_LIMIT = 10


class MovieService(DocumentService):
    resource = "movie"

    def __init__(self, db: AsyncIOMotorDatabase):
        super().__init__(MovieRepository(db))

    async def list_movies(self) -> List[Dict[str, Any]]:
        """Returns up to MOVIE_LIST_LIMIT movies in natural storage order."""
        movies = await self.list_all(limit=MOVIE_LIST_LIMIT)
        logger.info(f"Fetched {len(movies)} movies")
        return movies
