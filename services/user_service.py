"""User registration and lookup."""

from typing import List

from models.store import DocumentStore
from schemas.user import User
from services.errors import DuplicateUsernameError, StoreError
from utils.logger import setup_logger

logger = setup_logger(__name__)


class UserService:
    """Service for registering and listing users."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def register(self, username: str) -> User:
        """Return the user with this username, creating it on first use.

        Lookup and insert are not atomic. If a concurrent request inserts the
        same username in between, the unique constraint rejects our insert and
        the winner's record is returned instead.
        """
        existing = await self.store.find_user_by_username(username)
        if existing is not None:
            logger.info(f"Username already registered: {username} ({existing.id})")
            return existing

        try:
            user = await self.store.insert_user(username)
        except DuplicateUsernameError:
            logger.warning(f"Concurrent registration detected for username: {username}")
            existing = await self.store.find_user_by_username(username)
            if existing is None:
                raise StoreError(f"Username '{username}' reported as duplicate but not found")
            return existing

        logger.info(f"Created user: {username} ({user.id})")
        return user

    async def list_users(self) -> List[User]:
        return await self.store.list_users()
