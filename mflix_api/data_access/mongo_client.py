# MongoDB repository logic
# mflix_api/data_access/mongo_client.py

import logging
from typing import List, Optional, Dict, Any

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

# --- Base Repository ---
class BaseRepository:
    """Single-operation access to one collection. Driver errors are logged and re-raised."""
    collection_name: str = ""

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: Optional[str] = None):
        self.db = db
        self.collection_name = collection_name or self.collection_name
        self.collection: AsyncIOMotorCollection = db[self.collection_name]
        logger.debug(f"Initialized repository for collection: {self.collection_name}")

    async def find_many(self, query: Dict[str, Any], limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Finds documents matching a query in natural order, optionally capped."""
        try:
            cursor = self.collection.find(query)
            if limit:
                cursor = cursor.limit(limit)
            return await cursor.to_list(length=limit)
        except PyMongoError as e:
            logger.error(f"DB error finding {self.collection_name} with query {query}: {e}", exc_info=True)
            raise

    async def find_by_id(self, obj_id: ObjectId) -> Optional[Dict[str, Any]]:
        try:
            return await self.collection.find_one({"_id": obj_id})
        except PyMongoError as e:
            logger.error(f"DB error finding {self.collection_name} by ID {obj_id}: {e}", exc_info=True)
            raise

    async def insert_one(self, document: Dict[str, Any]) -> ObjectId:
        """Inserts a copy of the document and returns the generated id."""
        try:
            result = await self.collection.insert_one(dict(document))
            return result.inserted_id
        except PyMongoError as e:
            logger.error(f"DB error inserting into {self.collection_name}: {e}", exc_info=True)
            raise

    async def update_by_id(self, obj_id: ObjectId, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Merges fields into a document with $set. Returns the updated document, or None if no match."""
        try:
            return await self.collection.find_one_and_update(
                {"_id": obj_id},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(f"DB error updating {self.collection_name} {obj_id}: {e}", exc_info=True)
            raise

    async def delete_by_id(self, obj_id: ObjectId) -> bool:
        """Deletes a document. Returns False if nothing matched."""
        try:
            result = await self.collection.delete_one({"_id": obj_id})
            return result.deleted_count > 0
        except PyMongoError as e:
            logger.error(f"DB error deleting {self.collection_name} {obj_id}: {e}", exc_info=True)
            raise

# --- Movie Repository ---
class MovieRepository(BaseRepository):
    collection_name = "movies"

# --- Theater Repository ---
class TheaterRepository(BaseRepository):
    collection_name = "theaters"

# --- Comment Repository ---
class CommentRepository(BaseRepository):
    collection_name = "comments"

    async def find_by_movie(self, movie_id: ObjectId) -> List[Dict[str, Any]]:
        """Finds every comment referencing a movie."""
        return await self.find_many({"movie_id": movie_id})
