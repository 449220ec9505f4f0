"""MongoDB document store backed by motor."""

from datetime import date
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError

from config.settings import settings
from models.store import DocumentStore, build_exercise_query
from schemas.exercise import Exercise, NewExercise
from schemas.user import User
from services.errors import DuplicateUsernameError, StoreError
from utils.helpers import date_to_datetime, datetime_to_date
from utils.logger import setup_logger

logger = setup_logger(__name__)


def user_from_document(document: Dict[str, Any]) -> User:
    return User(id=str(document["_id"]), username=document["username"])


def exercise_from_document(document: Dict[str, Any]) -> Exercise:
    return Exercise(
        id=str(document["_id"]),
        user_id=document["user_id"],
        description=document["description"],
        duration=document["duration"],
        date=datetime_to_date(document["date"]),
    )


class MongoDocumentStore(DocumentStore):
    """Database connection manager and queries for users and exercises."""

    def __init__(self, mongo_uri: Optional[str] = None, database_name: Optional[str] = None):
        self.mongo_uri = mongo_uri or settings.mongo_uri
        self.database_name = database_name or settings.resolved_database_name()
        self.client: Optional[AsyncIOMotorClient] = None

    async def connect(self) -> None:
        """Create database connection and ensure indexes."""
        self.client = AsyncIOMotorClient(self.mongo_uri)
        logger.info(f"Connected to MongoDB database: {self.database_name}")

        try:
            await self.users.create_index([("username", ASCENDING)], unique=True)
            await self.exercises.create_index([("user_id", ASCENDING), ("date", ASCENDING)])
        except PyMongoError as e:
            raise StoreError(f"Failed to initialize collections: {e}") from e

        logger.info("MongoDB initialized: users and exercises collections ready")

    async def close(self) -> None:
        """Close database connection."""
        if self.client:
            self.client.close()
            self.client = None
            logger.info("Disconnected from MongoDB")

    @property
    def database(self):
        if self.client is None:
            raise StoreError("MongoDB client is not connected")
        return self.client[self.database_name]

    @property
    def users(self):
        return self.database.users

    @property
    def exercises(self):
        return self.database.exercises

    async def find_user_by_username(self, username: str) -> Optional[User]:
        try:
            document = await self.users.find_one({"username": username})
        except PyMongoError as e:
            raise StoreError(f"Error looking up username '{username}': {e}") from e
        return user_from_document(document) if document else None

    async def find_user_by_id(self, user_id: str) -> Optional[User]:
        # Anything that is not an ObjectId cannot match a stored user
        if not ObjectId.is_valid(user_id):
            return None
        try:
            document = await self.users.find_one({"_id": ObjectId(user_id)})
        except PyMongoError as e:
            raise StoreError(f"Error looking up user '{user_id}': {e}") from e
        return user_from_document(document) if document else None

    async def insert_user(self, username: str) -> User:
        try:
            result = await self.users.insert_one({"username": username})
        except DuplicateKeyError as e:
            raise DuplicateUsernameError(username) from e
        except PyMongoError as e:
            raise StoreError(f"Error creating user '{username}': {e}") from e
        return User(id=str(result.inserted_id), username=username)

    async def list_users(self) -> List[User]:
        try:
            cursor = self.users.find({})
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise StoreError(f"Error listing users: {e}") from e
        return [user_from_document(d) for d in documents]

    async def insert_exercise(self, exercise: NewExercise) -> Exercise:
        document = {
            "user_id": exercise.user_id,
            "description": exercise.description,
            "duration": exercise.duration,
            "date": date_to_datetime(exercise.date),
        }
        try:
            result = await self.exercises.insert_one(document)
        except PyMongoError as e:
            raise StoreError(f"Error creating exercise for user '{exercise.user_id}': {e}") from e
        return Exercise(id=str(result.inserted_id), **exercise.model_dump())

    async def find_exercises(
        self,
        user_id: str,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        limit: Optional[int] = None,
    ) -> List[Exercise]:
        query = build_exercise_query(user_id, date_from, date_to)
        try:
            cursor = self.exercises.find(query)
            if limit:
                cursor = cursor.limit(limit)
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise StoreError(f"Error fetching exercises for user '{user_id}': {e}") from e
        return [exercise_from_document(d) for d in documents]
