from datetime import datetime, timedelta, timezone

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from skills import SkillVocabulary


class InMemoryDatabase:
    """Stand-in for shared.database.Database backed by plain dicts."""

    def __init__(self):
        self.users: dict[ObjectId, dict] = {}
        self.jobs: dict[ObjectId, dict] = {}
        self.resumes: list[dict] = []
        self.applications: list[dict] = []

    async def connect(self):
        pass

    async def disconnect(self):
        pass

    def add_user(self, profile=None) -> str:
        oid = ObjectId()
        self.users[oid] = {"_id": oid, "email": f"{oid}@example.com", "profile": profile or {}}
        return str(oid)

    async def insert_job(self, job):
        oid = ObjectId()
        job.setdefault("posted_at", datetime.now(timezone.utc))
        self.jobs[oid] = {"_id": oid, **job}
        return str(oid)

    async def get_job(self, job_id):
        if not ObjectId.is_valid(job_id):
            return None
        return self.jobs.get(ObjectId(job_id))

    async def list_jobs(self, limit=0):
        docs = sorted(self.jobs.values(), key=lambda d: d["posted_at"], reverse=True)
        return docs[:limit] if limit else docs

    async def get_user(self, user_id):
        if not ObjectId.is_valid(user_id):
            return None
        return self.users.get(ObjectId(user_id))

    async def update_user_profile(self, user_id, parsed_resume, resume_path=None):
        user = self.users.get(ObjectId(user_id))
        if user is None:
            return False
        profile = user.setdefault("profile", {})
        profile["parsed_resume"] = parsed_resume
        profile["skills"] = parsed_resume.get("skills", [])
        if resume_path:
            profile["resume_path"] = resume_path
        return True

    async def insert_resume(self, resume):
        self.resumes.append(resume)
        return str(ObjectId())

    async def find_application(self, job_id, user_id):
        for app in self.applications:
            if app["job_id"] == job_id and app["user_id"] == user_id:
                return app
        return None

    async def insert_application(self, application):
        if await self.find_application(application["job_id"], application["user_id"]):
            raise DuplicateKeyError("duplicate application")
        oid = ObjectId()
        self.applications.append({"_id": oid, **application})
        return str(oid)


@pytest.fixture
def db():
    return InMemoryDatabase()


@pytest.fixture
def small_vocabulary():
    return SkillVocabulary(skills=("React", "Node.js", "MongoDB", "AWS"))


@pytest.fixture
def seed_jobs(db):
    """Insert jobs with explicit skills, oldest first."""

    async def _seed(skill_lists):
        start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        ids = []
        for i, skills in enumerate(skill_lists):
            ids.append(
                await db.insert_job(
                    {
                        "title": f"Job {i + 1}",
                        "company": "Acme",
                        "skills": list(skills),
                        "posted_at": start + timedelta(days=i),
                    }
                )
            )
        return ids

    return _seed
