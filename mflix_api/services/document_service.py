# mflix_api/services/document_service.py

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId

from mflix_api.core.errors import InvalidArgumentError, NotFoundError
from mflix_api.data_access.mongo_client import BaseRepository
from mflix_api.utils.helpers import parse_object_id

logger = logging.getLogger(__name__)


class DocumentService:
    """
    Get/create/update/delete of one resource type over a repository.

    Subclasses set `resource` (used in messages, e.g. "movie") and add
    their own listing operation.
    """
    resource: str = "document"

    def __init__(self, repository: BaseRepository):
        self.repository = repository

    def _parse_id(self, value: str, label: Optional[str] = None) -> ObjectId:
        return parse_object_id(value, label or self.resource)

    def _not_found(self) -> NotFoundError:
        return NotFoundError(
            f"{self.resource.capitalize()} not found",
            f"No {self.resource} found with the given ID",
        )

    async def get_by_id(self, doc_id: str) -> Dict[str, Any]:
        """
        Retrieves a single document.

        Raises:
            InvalidArgumentError: If doc_id is not a well-formed ObjectId.
            NotFoundError: If no document has this id.
        """
        obj_id = self._parse_id(doc_id)
        document = await self.repository.find_by_id(obj_id)
        if document is None:
            logger.warning(f"{self.resource.capitalize()} with ID {doc_id} not found in database.")
            raise self._not_found()
        return document

    async def create(self, body: Dict[str, Any]) -> ObjectId:
        """Inserts the body as a new document and returns its generated id."""
        # Ids are always generated by the store so they stay addressable by the id routes
        document = {key: value for key, value in body.items() if key != "_id"}
        inserted_id = await self.repository.insert_one(document)
        logger.info(f"Created {self.resource} {inserted_id}")
        return inserted_id

    async def update(self, doc_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merges the body into an existing document and returns the result.

        Raises:
            InvalidArgumentError: On a malformed id or an empty update.
            NotFoundError: If no document matched.
        """
        obj_id = self._parse_id(doc_id)
        # _id is immutable in MongoDB
        fields = {key: value for key, value in body.items() if key != "_id"}
        if not fields:
            raise InvalidArgumentError("Invalid request body", "No fields to update")

        updated = await self.repository.update_by_id(obj_id, fields)
        if updated is None:
            logger.warning(f"Update skipped: {self.resource} with ID {doc_id} not found.")
            raise self._not_found()
        logger.info(f"Updated {self.resource} {doc_id} (fields: {sorted(fields)})")
        return updated

    async def delete(self, doc_id: str) -> None:
        """
        Raises:
            InvalidArgumentError: If doc_id is malformed.
            NotFoundError: If nothing was deleted.
        """
        obj_id = self._parse_id(doc_id)
        if not await self.repository.delete_by_id(obj_id):
            logger.warning(f"Delete skipped: {self.resource} with ID {doc_id} not found.")
            raise self._not_found()
        logger.info(f"Deleted {self.resource} {doc_id}")

    async def list_all(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        return await self.repository.find_many({}, limit=limit)
