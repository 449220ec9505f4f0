"""Domain errors raised by the store and service layers."""

USER_NOT_FOUND_MESSAGE = "The user does not exist in the database!"


class ExerciseTrackerError(Exception):
    """Base class for exercise tracker errors."""


class UserNotFoundError(ExerciseTrackerError):
    def __init__(self, user_id: str):
        super().__init__(USER_NOT_FOUND_MESSAGE)
        self.user_id = user_id


class DuplicateUsernameError(ExerciseTrackerError):
    def __init__(self, username: str):
        super().__init__(f"Username '{username}' is already taken")
        self.username = username


class StoreError(ExerciseTrackerError):
    """Wraps a failure reported by the underlying document store."""


class InvalidRequestError(ExerciseTrackerError):
    """Request body could not be read as JSON or form data."""
