# mflix_api/services/comment_service.py

import logging
from typing import Any, Dict, List

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from mflix_api.core.errors import NotFoundError
from mflix_api.data_access.mongo_client import CommentRepository
from mflix_api.services.document_service import DocumentService

logger = logging.getLogger(__name__)


class CommentService(DocumentService):
    """
    Comments are addressed through their movie in URLs, but stored in their
    own collection. The movie reference is not checked against `movies`.
    """
    resource = "comment"

    def __init__(self, db: AsyncIOMotorDatabase):
        self.comments = CommentRepository(db)
        super().__init__(self.comments)

    async def list_by_movie(self, movie_id: str) -> List[Dict[str, Any]]:
        """
        Returns the comments of a movie.

        Raises:
            InvalidArgumentError: If movie_id is malformed.
            NotFoundError: If the movie has no comments.
        """
        movie_obj_id = self._parse_id(movie_id, "movie")
        comments = await self.comments.find_by_movie(movie_obj_id)
        if not comments:
            # An empty list is reported as 404; see DESIGN.md open questions
            logger.warning(f"No comments found for movie {movie_id}")
            raise NotFoundError("No comments found for this movie", "No comments available")
        logger.info(f"Fetched {len(comments)} comments for movie {movie_id}")
        return comments

    async def create_for_movie(self, movie_id: str, body: Dict[str, Any]) -> ObjectId:
        """Stores the body unvalidated, tagged with the movie it belongs to."""
        movie_obj_id = self._parse_id(movie_id, "movie")
        return await self.create({**body, "movie_id": movie_obj_id})

    def check_movie_id(self, movie_id: str) -> ObjectId:
        """Validates the movie segment of a comment URL."""
        return self._parse_id(movie_id, "movie")
