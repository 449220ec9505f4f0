"""User collection schema."""

from pydantic import BaseModel, Field


class User(BaseModel):
    """User collection model."""
    id: str = Field(..., description="Store-assigned user identifier")
    username: str = Field(..., description="Unique username")
