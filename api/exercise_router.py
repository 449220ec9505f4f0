"""Exercise API routes."""

from typing import Any, Dict, Union

from fastapi import APIRouter, Depends

from api.dependencies import get_exercise_service, get_log_query, read_body
from models.schemas import (
    ErrorResponse,
    ExerciseCreateRequest,
    ExerciseLogResponse,
    ExerciseResponse,
    LogQuery,
)
from services.errors import UserNotFoundError
from services.exercise_service import ExerciseService
from utils.helpers import format_exercise_date

router = APIRouter(prefix="/api/users", tags=["exercises"])


@router.post("/{user_id}/exercises", response_model=Union[ExerciseResponse, ErrorResponse])
async def create_exercise(
    user_id: str,
    body: Dict[str, Any] = Depends(read_body),
    service: ExerciseService = Depends(get_exercise_service),
):
    """
    Log an exercise for a user.
    An unknown user is reported in a 200 body as {"error": ...}.
    """
    payload = ExerciseCreateRequest.model_validate(body)

    try:
        user, exercise = await service.add_exercise(user_id, payload)
    except UserNotFoundError as e:
        return ErrorResponse(error=str(e))

    return ExerciseResponse(
        username=user.username,
        description=exercise.description,
        duration=exercise.duration,
        date=format_exercise_date(exercise.date),
        id=user.id,
    )


@router.get("/{user_id}/logs", response_model=ExerciseLogResponse)
async def get_exercise_log(
    user_id: str,
    query: LogQuery = Depends(get_log_query),
    service: ExerciseService = Depends(get_exercise_service),
):
    """Get a user's exercise log, optionally filtered by from/to and limit."""
    return await service.get_log(user_id, query)
