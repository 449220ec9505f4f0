"""FastAPI dependencies: store handle, services and request parsing."""

import json
from typing import Any, Dict, Optional

from fastapi import Depends, Query, Request
from starlette.datastructures import UploadFile

from models.schemas import LogQuery
from models.store import DocumentStore
from services.errors import InvalidRequestError
from services.exercise_service import ExerciseService
from services.user_service import UserService

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_store(request: Request) -> DocumentStore:
    """Store handle attached to the application by create_app."""
    return request.app.state.store


def get_user_service(store: DocumentStore = Depends(get_store)) -> UserService:
    return UserService(store)


def get_exercise_service(store: DocumentStore = Depends(get_store)) -> ExerciseService:
    return ExerciseService(store)


async def read_body(request: Request) -> Dict[str, Any]:
    """Read a JSON or form-encoded body into a plain dict.

    Both encodings are accepted so HTML forms and JSON clients can post to
    the same endpoints. An empty body yields an empty dict.
    """
    content_type = request.headers.get("content-type", "").split(";", 1)[0].strip().lower()

    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return {
            key: value for key, value in form.items()
            if not isinstance(value, UploadFile)
        }

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidRequestError(f"Malformed JSON body: {e}") from e
    if not isinstance(data, dict):
        raise InvalidRequestError("Request body must be a JSON object")
    return data


def get_log_query(
    date_from: Optional[str] = Query(None, alias="from", description="Inclusive lower date bound"),
    date_to: Optional[str] = Query(None, alias="to", description="Inclusive upper date bound"),
    limit: Optional[str] = Query(None, description="Maximum number of log entries"),
) -> LogQuery:
    """Parse the log filters; invalid values raise pydantic's ValidationError."""
    return LogQuery(date_from=date_from, date_to=date_to, limit=limit)
