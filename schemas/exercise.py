"""Exercise collection schema."""

import datetime as dt
from typing import Union

from pydantic import BaseModel, Field


class Exercise(BaseModel):
    """Exercise collection model."""
    id: str = Field(..., description="Store-assigned exercise identifier")
    user_id: str = Field(..., description="Identifier of the user who logged the exercise")
    description: str = Field(..., description="What was done")
    duration: Union[int, float] = Field(..., description="Duration in minutes")
    date: dt.date = Field(..., description="Calendar date of the exercise")


class NewExercise(BaseModel):
    """Exercise fields supplied before the store assigns an id."""
    user_id: str
    description: str
    duration: Union[int, float]
    date: dt.date
