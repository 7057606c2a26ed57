"""
MongoDB database connection and operations using Motor (async driver).
"""

from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from loguru import logger
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING, IndexModel

from .config import Settings, get_settings


def _object_id(value: str) -> Optional[ObjectId]:
    """Parse a document ID, None if it is not a valid ObjectId."""
    if isinstance(value, ObjectId):
        return value
    if not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


class Database:
    """Async MongoDB database wrapper."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._client: Optional[AsyncIOMotorClient] = None
        self._db: Optional[AsyncIOMotorDatabase] = None

    async def connect(self) -> None:
        """Establish database connection."""
        if self._client is not None:
            return

        logger.info(f"Connecting to MongoDB: {self.settings.mongodb_database}")
        self._client = AsyncIOMotorClient(self.settings.mongodb_uri)
        self._db = self._client[self.settings.mongodb_database]

        # Verify connection
        await self._client.admin.command("ping")
        logger.info("MongoDB connection established")

    async def disconnect(self) -> None:
        """Close database connection."""
        if self._client:
            self._client.close()
            self._client = None
            self._db = None
            logger.info("MongoDB connection closed")

    @property
    def db(self) -> AsyncIOMotorDatabase:
        """Get database instance."""
        if self._db is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self._db

    # -------------------------------------------------------------------------
    # Jobs Collection
    # -------------------------------------------------------------------------

    async def insert_job(self, job: dict[str, Any]) -> str:
        """Insert a new job, returns job_id."""
        job.setdefault("posted_at", datetime.now(timezone.utc))
        result = await self.db.jobs.insert_one(job)
        return str(result.inserted_id)

    async def get_job(self, job_id: str) -> Optional[dict[str, Any]]:
        """Get job by ID."""
        oid = _object_id(job_id)
        if oid is None:
            return None
        return await self.db.jobs.find_one({"_id": oid})

    async def list_jobs(self, limit: int = 0) -> list[dict[str, Any]]:
        """All jobs, newest first. A limit of 0 means no limit."""
        cursor = self.db.jobs.find({}).sort("posted_at", DESCENDING)
        if limit:
            cursor = cursor.limit(limit)
        return await cursor.to_list(length=limit or None)

    # -------------------------------------------------------------------------
    # Users Collection
    # -------------------------------------------------------------------------

    async def get_user(self, user_id: str) -> Optional[dict[str, Any]]:
        """Get user by ID."""
        oid = _object_id(user_id)
        if oid is None:
            return None
        return await self.db.users.find_one({"_id": oid})

    async def update_user_profile(
        self,
        user_id: str,
        parsed_resume: dict[str, Any],
        resume_path: Optional[str] = None,
    ) -> bool:
        """Store parsed resume data on the user's profile."""
        update: dict[str, Any] = {
            "profile.parsed_resume": parsed_resume,
            "profile.skills": parsed_resume.get("skills", []),
            "updated_at": datetime.now(timezone.utc),
        }
        if resume_path:
            update["profile.resume_path"] = resume_path

        result = await self.db.users.update_one(
            {"_id": _object_id(user_id)}, {"$set": update}
        )
        return result.matched_count > 0

    # -------------------------------------------------------------------------
    # Resumes Collection
    # -------------------------------------------------------------------------

    async def insert_resume(self, resume: dict[str, Any]) -> str:
        """Insert a processed resume record."""
        resume["uploaded_at"] = datetime.now(timezone.utc)
        result = await self.db.resumes.insert_one(resume)
        return str(result.inserted_id)

    # -------------------------------------------------------------------------
    # Applications Collection
    # -------------------------------------------------------------------------

    async def find_application(
        self, job_id: str, user_id: str
    ) -> Optional[dict[str, Any]]:
        """Get the application of a user for a job, if any."""
        return await self.db.applications.find_one(
            {"job_id": job_id, "user_id": user_id}
        )

    async def insert_application(self, application: dict[str, Any]) -> str:
        """Insert a new application."""
        result = await self.db.applications.insert_one(application)
        return str(result.inserted_id)

    # -------------------------------------------------------------------------
    # Index Setup
    # -------------------------------------------------------------------------

    async def ensure_indexes(self) -> None:
        """Create database indexes."""
        await self.db.users.create_indexes(
            [IndexModel([("email", ASCENDING)], unique=True)]
        )

        job_indexes = [
            IndexModel([("posted_at", DESCENDING)]),
            IndexModel([("skills", ASCENDING)]),
            IndexModel([("company", ASCENDING)]),
        ]
        await self.db.jobs.create_indexes(job_indexes)

        await self.db.resumes.create_indexes(
            [IndexModel([("user_id", ASCENDING)])]
        )

        # One application per user and job
        app_indexes = [
            IndexModel([("job_id", ASCENDING), ("user_id", ASCENDING)], unique=True),
            IndexModel([("status", ASCENDING)]),
        ]
        await self.db.applications.create_indexes(app_indexes)

        logger.info("Database indexes created")

