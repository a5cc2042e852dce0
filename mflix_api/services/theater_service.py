# mflix_api/services/theater_service.py

import logging
from typing import Any, Dict, List

from motor.motor_asyncio import AsyncIOMotorDatabase

from mflix_api.data_access.mongo_client import TheaterRepository
from mflix_api.services.document_service import DocumentService

logger = logging.getLogger(__name__)


class TheaterService(DocumentService):
    resource = "theater"

    def __init__(self, db: AsyncIOMotorDatabase):
        super().__init__(TheaterRepository(db))

    async def list_theaters(self) -> List[Dict[str, Any]]:
        theaters = await self.list_all()
        logger.info(f"Fetched {len(theaters)} theaters")
        return theaters
