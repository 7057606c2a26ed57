"""
Recommendation service.

Glue between the skill matcher and the document store: derives skills when
jobs are posted or resumes processed, recommends jobs and records
applications.
"""

from typing import Any, Optional

from loguru import logger
from pymongo.errors import DuplicateKeyError

from shared.database import Database
from shared.errors import AlreadyAppliedError, JobNotFoundError, UserNotFoundError
from shared.models import Application, CandidateProfile, JobPosting
from skills import Recommendations, SkillVocabulary, extract_skills, job_skill_text, rank

POSTING_FIELDS = (
    "title",
    "company",
    "location",
    "salary",
    "type",
    "description",
    "requirements",
    "company_website",
)


async def post_job(
    db: Database,
    job_data: dict[str, Any],
    posted_by: Optional[str],
    vocabulary: SkillVocabulary,
) -> JobPosting:
    """
    Store a new job posting with skills derived from its text.

    Args:
        db: Connected database
        job_data: Posting fields (title, company, description, requirements, ...)
        posted_by: Email of the poster
        vocabulary: Skills to look for

    Returns:
        The stored JobPosting, including its new ID
    """
    # YAML and JSON may hand over numbers, e.g. `salary: 120000`
    fields = {
        k: str(job_data[k]) for k in POSTING_FIELDS if job_data.get(k) is not None
    }
    skills = extract_skills(
        job_skill_text(fields.get("description"), fields.get("requirements")),
        vocabulary,
    )

    job = JobPosting(**fields, skills=skills, posted_by=posted_by)
    job_id = await db.insert_job(job.to_db_dict())

    logger.info(f"Posted job {job_id}: {job.title} at {job.company} (skills: {skills})")
    return job.model_copy(update={"id": job_id})


async def list_jobs(db: Database, limit: int = 0) -> list[JobPosting]:
    """All job postings, newest first."""
    docs = await db.list_jobs(limit)
    return [JobPosting.from_document(doc) for doc in docs]


async def get_job(db: Database, job_id: str) -> JobPosting:
    """Job posting by ID, JobNotFoundError if there is none."""
    doc = await db.get_job(job_id)
    if doc is None:
        raise JobNotFoundError(job_id)
    return JobPosting.from_document(doc)


async def get_candidate_profile(db: Database, user_id: str) -> CandidateProfile:
    user = await db.get_user(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return CandidateProfile.from_user_document(user)


async def update_profile_from_resume(
    db: Database,
    user_id: str,
    resume_text: str,
    vocabulary: SkillVocabulary,
    resume_path: Optional[str] = None,
) -> CandidateProfile:
    """
    Derive a skill profile from resume text and store it on the user.

    Returns:
        The updated CandidateProfile
    """
    user = await db.get_user(user_id)
    if user is None:
        raise UserNotFoundError(user_id)

    skills = extract_skills(resume_text, vocabulary)
    parsed_resume = {"skills": skills}

    await db.insert_resume(
        {
            "user_id": user_id,
            "file_path": resume_path,
            "parsed_data": parsed_resume,
        }
    )
    await db.update_user_profile(user_id, parsed_resume, resume_path=resume_path)

    logger.info(f"Updated profile for user {user_id}: {len(skills)} skills")

    profile = CandidateProfile.from_user_document(user)
    return profile.model_copy(
        update={"skills": skills, "resume_path": resume_path or profile.resume_path}
    )


async def recommend_jobs(db: Database, user_id: str) -> Recommendations:
    """Rank all posted jobs for a user."""
    profile = await get_candidate_profile(db, user_id)

    if not profile.has_skill_profile:
        logger.debug(f"User {user_id} has no skill profile")
        return rank(None, [])

    jobs = await list_jobs(db)
    recommendations = rank(profile.skills, jobs)

    logger.info(
        f"Recommended {len(recommendations.jobs)} of {len(jobs)} jobs "
        f"for user {user_id}"
    )
    return recommendations


async def apply_to_job(db: Database, job_id: str, user_id: str) -> Application:
    """
    Submit an application.

    Raises:
        UserNotFoundError: The user does not exist
        JobNotFoundError: The job does not exist
        AlreadyAppliedError: The user already applied to this job
    """
    if await db.get_user(user_id) is None:
        raise UserNotFoundError(user_id)

    if await db.get_job(job_id) is None:
        raise JobNotFoundError(job_id)

    if await db.find_application(job_id, user_id) is not None:
        raise AlreadyAppliedError(job_id, user_id)

    application = Application(job_id=job_id, user_id=user_id)
    try:
        application_id = await db.insert_application(application.to_db_dict())
    except DuplicateKeyError:
        # Lost a race with a concurrent application
        raise AlreadyAppliedError(job_id, user_id)

    logger.info(f"User {user_id} applied to job {job_id}")
    return application.model_copy(update={"id": application_id})
