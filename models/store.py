"""Document store interface shared by the MongoDB and in-memory backends."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Dict, List, Optional

from schemas.exercise import Exercise, NewExercise
from schemas.user import User
from utils.helpers import date_to_datetime


def build_exercise_query(
    user_id: str,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
) -> Dict[str, Any]:
    """Build the exercises filter for a user's log.

    Both bounds are inclusive and compared at day precision.
    """
    query: Dict[str, Any] = {"user_id": user_id}
    if date_from is not None or date_to is not None:
        query["date"] = {}
        if date_from is not None:
            query["date"]["$gte"] = date_to_datetime(date_from)
        if date_to is not None:
            query["date"]["$lte"] = date_to_datetime(date_to)
    return query


class DocumentStore(ABC):
    """Persists users and exercises.

    Implementations must keep usernames unique and return records in
    their natural (insertion) order.
    """

    async def connect(self) -> None:
        """Open connections and prepare collections."""

    async def close(self) -> None:
        """Release connections."""

    @abstractmethod
    async def find_user_by_username(self, username: str) -> Optional[User]:
        ...

    @abstractmethod
    async def find_user_by_id(self, user_id: str) -> Optional[User]:
        ...

    @abstractmethod
    async def insert_user(self, username: str) -> User:
        """Insert a user, raising DuplicateUsernameError if the name is taken."""

    @abstractmethod
    async def list_users(self) -> List[User]:
        ...

    @abstractmethod
    async def insert_exercise(self, exercise: NewExercise) -> Exercise:
        ...

    @abstractmethod
    async def find_exercises(
        self,
        user_id: str,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        limit: Optional[int] = None,
    ) -> List[Exercise]:
        ...
