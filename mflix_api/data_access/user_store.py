# Account storage used by the auth endpoints
# mflix_api/data_access/user_store.py

import logging
from typing import Dict, Optional, Protocol

from mflix_api.core.errors import AlreadyExistsError
from mflix_api.models.auth import UserRecord

logger = logging.getLogger(__name__)


class UserStore(Protocol):
    """Lookup and insertion of accounts by username."""

    async def find_user(self, username: str) -> Optional[UserRecord]:
        ...

    async def insert_user(self, record: UserRecord) -> None:
        ...


class InMemoryUserStore:
    """
    Process-local account store. Contents are lost when the process exits,
    and nothing is shared between application instances.
    """

    def __init__(self, records: Optional[Dict[str, UserRecord]] = None):
        self._users: Dict[str, UserRecord] = dict(records or {})

    async def find_user(self, username: str) -> Optional[UserRecord]:
        return self._users.get(username)

    async def insert_user(self, record: UserRecord) -> None:
        if record.username in self._users:
            raise AlreadyExistsError("User already exists", f"Username '{record.username}' is taken")
        self._users[record.username] = record
        logger.info(f"Stored user '{record.username}' ({len(self._users)} in memory).")

    def __len__(self) -> int:
        return len(self._users)
