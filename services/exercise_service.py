"""Exercise logging and log retrieval."""

from typing import Optional, Tuple

from models.schemas import (
    ExerciseCreateRequest,
    ExerciseLogResponse,
    LogEntry,
    LogQuery,
)
from models.store import DocumentStore
from schemas.exercise import Exercise, NewExercise
from schemas.user import User
from services.errors import UserNotFoundError
from utils.helpers import format_exercise_date, today
from utils.logger import setup_logger

logger = setup_logger(__name__)


class ExerciseService:
    """Service for recording exercises and querying a user's log."""

    def __init__(self, store: DocumentStore):
        self.store = store

    @staticmethod
    def resolve_user_id(path_user_id: str, payload: ExerciseCreateRequest) -> str:
        """The ``:_id`` body field takes precedence over the path parameter."""
        return payload.user_id_override or path_user_id

    async def add_exercise(
        self,
        path_user_id: str,
        payload: ExerciseCreateRequest,
    ) -> Tuple[User, Exercise]:
        """Record an exercise for an existing user.

        Raises UserNotFoundError without writing anything when the user
        does not exist.
        """
        user_id = self.resolve_user_id(path_user_id, payload)

        user = await self.store.find_user_by_id(user_id)
        if user is None:
            logger.info(f"Exercise rejected, unknown user_id: {user_id}")
            raise UserNotFoundError(user_id)

        exercise = await self.store.insert_exercise(NewExercise(
            user_id=user_id,
            description=payload.description,
            duration=payload.duration,
            date=payload.date or today(),
        ))
        logger.info(f"Logged exercise {exercise.id} for user {user_id} on {exercise.date}")
        return user, exercise

    async def get_log(self, user_id: str, query: Optional[LogQuery] = None) -> ExerciseLogResponse:
        """Return the user's exercises filtered by date range and limit."""
        query = query or LogQuery()

        exercises = await self.store.find_exercises(
            user_id,
            date_from=query.date_from,
            date_to=query.date_to,
            limit=query.limit,
        )

        user = await self.store.find_user_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        log = [
            LogEntry(
                description=e.description,
                duration=e.duration,
                date=format_exercise_date(e.date),
            )
            for e in exercises
        ]
        logger.info(f"Retrieved {len(log)} log entries for user_id: {user_id}")
        return ExerciseLogResponse(
            username=user.username,
            count=len(log),
            id=user.id,
            log=log,
        )
