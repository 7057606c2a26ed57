# Shared module for common utilities, models, and configuration
from .config import Settings, get_settings
from .database import Database
from .errors import (
    AlreadyAppliedError,
    JobNotFoundError,
    TalentTrekError,
    UserNotFoundError,
)
from .models import Application, ApplicationStatus, CandidateProfile, JobPosting

__all__ = [
    "Settings",
    "get_settings",
    "Database",
    "JobPosting",
    "CandidateProfile",
    "Application",
    "ApplicationStatus",
    "TalentTrekError",
    "UserNotFoundError",
    "JobNotFoundError",
    "AlreadyAppliedError",
]
