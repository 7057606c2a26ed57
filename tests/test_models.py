from datetime import timezone

import pytest
from bson import ObjectId
from pydantic import ValidationError

from shared.models import Application, ApplicationStatus, CandidateProfile, JobPosting


def test_job_posting_from_document():
    oid = ObjectId()
    doc = {
        "_id": oid,
        "title": "Backend Developer",
        "company": "StartupXYZ",
        "skills": ["Node.js", "MongoDB"],
        "company_website": None,
        "created_at": "ignored",
    }

    job = JobPosting.from_document(doc)

    assert job.id == str(oid)
    assert job.title == "Backend Developer"
    assert job.skills == ["Node.js", "MongoDB"]
    assert job.company_website is None
    assert "id" not in job.to_db_dict()


def test_job_posting_is_frozen():
    job = JobPosting(title="Frontend Developer")

    with pytest.raises(ValidationError):
        job.title = "Other"


def test_candidate_without_parsed_resume_has_no_profile():
    profile = CandidateProfile.from_user_document({"_id": ObjectId(), "profile": {}})

    assert profile.skills is None
    assert not profile.has_skill_profile


def test_candidate_with_empty_skills_has_profile():
    doc = {"_id": ObjectId(), "profile": {"parsed_resume": {"skills": []}}}

    profile = CandidateProfile.from_user_document(doc)

    assert profile.skills == []
    assert profile.has_skill_profile


def test_candidate_reads_parsed_resume():
    doc = {
        "_id": ObjectId(),
        "profile": {
            "parsed_resume": {"skills": ["React"], "summary": "Web developer"},
            "education": ["BSc Computer Science"],
            "resume_path": "uploads/1.pdf",
        },
    }

    profile = CandidateProfile.from_user_document(doc)

    assert profile.skills == ["React"]
    assert profile.summary == "Web developer"
    assert profile.education == ["BSc Computer Science"]
    assert profile.resume_path == "uploads/1.pdf"


def test_application_defaults_to_pending():
    application = Application(job_id="j1", user_id="u1")

    assert application.status == ApplicationStatus.PENDING.value
    assert application.to_db_dict()["status"] == "pending"


def test_timestamps_default_to_utc():
    assert JobPosting().posted_at.tzinfo == timezone.utc
    assert Application(job_id="j1", user_id="u1").applied_at.tzinfo == timezone.utc
