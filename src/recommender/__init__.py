"""
Recommender Service - posts jobs, builds skill profiles, recommends jobs
and records applications on top of the skill matcher.
"""

from .service import (
    apply_to_job,
    get_candidate_profile,
    get_job,
    list_jobs,
    post_job,
    recommend_jobs,
    update_profile_from_resume,
)

__all__ = [
    "apply_to_job",
    "get_candidate_profile",
    "get_job",
    "list_jobs",
    "post_job",
    "recommend_jobs",
    "update_profile_from_resume",
]
