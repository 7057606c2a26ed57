"""
Skill overlap scoring.

All scoring functions are deterministic - same inputs produce same outputs.
"""

from typing import Sequence


def score(candidate_skills: Sequence[str], job_skills: Sequence[str]) -> float:
    """
    Calculate the skill match score (0-1).

    Formula:
    - matched = candidate skills also listed by the job (case-insensitive)
    - score = matched / max(|candidate set|, |job set|)

    Duplicates and case variants count once. Either side empty scores 0.

    Args:
        candidate_skills: Skills from the candidate profile
        job_skills: Skills of the job posting

    Returns:
        Score from 0.0 to 1.0
    """
    if not candidate_skills or not job_skills:
        return 0.0

    candidate_lower = {s.lower() for s in candidate_skills}
    job_lower = {s.lower() for s in job_skills}

    matched = len(candidate_lower & job_lower)
    return matched / max(len(candidate_lower), len(job_lower))


def matched_skills(
    candidate_skills: Sequence[str], job_skills: Sequence[str]
) -> list[str]:
    """Candidate skills that the job also lists, in candidate order."""
    job_lower = {s.lower() for s in job_skills}
    return [s for s in candidate_skills if s.lower() in job_lower]
