"""
Pydantic models for Jobs, Candidates and Applications.

These are plain immutable values. The database layer converts raw MongoDB
documents into them; nothing here talks to the database.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class ApplicationStatus(str, Enum):
    """Application status."""

    PENDING = "pending"  # Just submitted
    REVIEWED = "reviewed"  # Seen by the poster
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class JobPosting(BaseModel):
    """Job posting as stored in the jobs collection."""

    id: Optional[str] = Field(default=None, description="Document ID")
    title: str = Field(default="", description="Job title")
    company: str = Field(default="", description="Company name")
    location: str = Field(default="", description="Job location")
    salary: str = Field(default="", description="Salary range as free text")
    type: str = Field(default="", description="Employment type, e.g. Full Time")
    description: str = Field(default="", description="Full job description")
    requirements: str = Field(default="", description="Requirements as free text")
    company_website: Optional[str] = Field(default=None, description="Company URL")

    # Derived from description + requirements when posted, or seeded directly
    skills: list[str] = Field(default_factory=list)

    posted_by: Optional[str] = Field(default=None, description="Poster email")
    posted_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Config:
        frozen = True

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "JobPosting":
        """Build from a raw jobs collection document."""
        data = {k: v for k, v in doc.items() if k != "_id" and v is not None}
        if "_id" in doc:
            data["id"] = str(doc["_id"])
        return cls(**data)

    def to_db_dict(self) -> dict:
        """Convert to dictionary for database insert."""
        return self.model_dump(exclude={"id"})


class CandidateProfile(BaseModel):
    """Skill profile attached to a user."""

    user_id: str = Field(..., description="Reference to the user")

    # None means no resume has been processed yet; [] is a real, empty profile
    skills: Optional[list[str]] = Field(default=None)
    experience: list[str] = Field(default_factory=list)
    education: list[str] = Field(default_factory=list)
    summary: Optional[str] = Field(default=None)
    resume_path: Optional[str] = Field(default=None)

    class Config:
        frozen = True

    @property
    def has_skill_profile(self) -> bool:
        return self.skills is not None

    @classmethod
    def from_user_document(cls, doc: dict[str, Any]) -> "CandidateProfile":
        """Build from a users collection document with an embedded profile."""
        profile = doc.get("profile") or {}
        parsed = profile.get("parsed_resume")

        return cls(
            user_id=str(doc["_id"]),
            skills=list(parsed.get("skills") or []) if parsed is not None else None,
            experience=list(profile.get("experience") or []),
            education=list(profile.get("education") or []),
            summary=parsed.get("summary") if parsed else None,
            resume_path=profile.get("resume_path"),
        )


class Application(BaseModel):
    """Job application record."""

    id: Optional[str] = Field(default=None, description="Document ID")
    job_id: str = Field(..., description="Reference to JobPosting")
    user_id: str = Field(..., description="Reference to the applicant")
    status: ApplicationStatus = Field(default=ApplicationStatus.PENDING)
    applied_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Config:
        frozen = True
        use_enum_values = True
        validate_default = True

    def to_db_dict(self) -> dict:
        return self.model_dump(exclude={"id"})
