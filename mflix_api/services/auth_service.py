import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from mflix_api.core import security
from mflix_api.core.config import Settings
from mflix_api.core.errors import AlreadyExistsError, UnauthorizedError
from mflix_api.data_access.user_store import InMemoryUserStore, UserStore
from mflix_api.models.auth import Credentials, TokenPair, UserRecord

logger = logging.getLogger(__name__)


def build_user_store(settings: Settings) -> InMemoryUserStore:
    """Creates the in-memory store, seeded with the demo account when one is configured."""
    if not (settings.DEMO_USERNAME and settings.DEMO_PASSWORD):
        return InMemoryUserStore()

    record = UserRecord(
        username=settings.DEMO_USERNAME,
        password_hash=security.hash_password(settings.DEMO_PASSWORD.get_secret_value()),
    )
    logger.info(f"Seeded demo account '{record.username}'.")
    return InMemoryUserStore({record.username: record})


class AuthService:
    def __init__(self, user_store: UserStore):
        self.user_store = user_store

    @staticmethod
    def _issue_tokens(username: str) -> TokenPair:
        return TokenPair(
            access_token=security.create_access_token(username),
            refresh_token=security.create_refresh_token(username),
            access_max_age=security.token_max_age(security.ACCESS_TOKEN_TYPE),
            refresh_max_age=security.token_max_age(security.REFRESH_TOKEN_TYPE),
        )

    async def login_user(self, credentials: Credentials) -> TokenPair:
        """
        Checks a username/password pair and issues a token pair.

        Raises:
            UnauthorizedError: If the user is unknown or the password does not match.
        """
        logger.info(f"Attempting login for user: {credentials.username}")
        user: Optional[UserRecord] = await self.user_store.find_user(credentials.username)
        if user is None or not await run_in_threadpool(
            security.verify_password, credentials.password, user.password_hash
        ):
            logger.warning(f"Login failed for user: {credentials.username}")
            raise UnauthorizedError("Invalid credentials", "Invalid username or password")

        logger.info(f"Successfully logged in user: {credentials.username}")
        return self._issue_tokens(credentials.username)

    async def register_user(self, credentials: Credentials) -> TokenPair:
        """
        Stores a new account and issues a token pair.

        Raises:
            AlreadyExistsError: If the username is taken.
        """
        logger.info(f"Attempting to register user: {credentials.username}")
        if await self.user_store.find_user(credentials.username) is not None:
            logger.warning(f"Registration failed: user {credentials.username} already exists.")
            raise AlreadyExistsError("User already exists", f"Username '{credentials.username}' is taken")

        password_hash = await run_in_threadpool(security.hash_password, credentials.password)
        await self.user_store.insert_user(UserRecord(username=credentials.username, password_hash=password_hash))

        logger.info(f"Successfully registered user: {credentials.username}")
        return self._issue_tokens(credentials.username)
