"""In-process document store with the same query semantics as MongoDB."""

from datetime import date
from typing import Dict, List, Optional

from bson import ObjectId

from models.store import DocumentStore
from schemas.exercise import Exercise, NewExercise
from schemas.user import User
from services.errors import DuplicateUsernameError
from utils.logger import setup_logger

logger = setup_logger(__name__)


class MemoryDocumentStore(DocumentStore):
    """Keeps users and exercises in insertion-ordered lists.

    Used for local runs without MongoDB and by the test-suite.
    """

    def __init__(self):
        self._users: List[User] = []
        self._users_by_id: Dict[str, User] = {}
        self._exercises: List[Exercise] = []

    async def connect(self) -> None:
        logger.info("Using in-memory document store")

    async def find_user_by_username(self, username: str) -> Optional[User]:
        for user in self._users:
            if user.username == username:
                return user
        return None

    async def find_user_by_id(self, user_id: str) -> Optional[User]:
        return self._users_by_id.get(user_id)

    async def insert_user(self, username: str) -> User:
        if any(u.username == username for u in self._users):
            raise DuplicateUsernameError(username)
        user = User(id=str(ObjectId()), username=username)
        self._users.append(user)
        self._users_by_id[user.id] = user
        return user

    async def list_users(self) -> List[User]:
        return list(self._users)

    async def insert_exercise(self, exercise: NewExercise) -> Exercise:
        stored = Exercise(id=str(ObjectId()), **exercise.model_dump())
        self._exercises.append(stored)
        return stored

    async def find_exercises(
        self,
        user_id: str,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        limit: Optional[int] = None,
    ) -> List[Exercise]:
        matched = []
        for exercise in self._exercises:
            if exercise.user_id != user_id:
                continue
            if date_from is not None and exercise.date < date_from:
                continue
            if date_to is not None and exercise.date > date_to:
                continue
            matched.append(exercise)
            if limit and len(matched) >= limit:
                break
        return matched
