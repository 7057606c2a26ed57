"""
Job recommendation ranking.
Scores every job against a candidate's skills and keeps the best matches.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from loguru import logger

from shared.models import JobPosting

from .scorer import matched_skills, score

# Matches at or below this score are noise and never recommended
MATCH_THRESHOLD = 0.1

MAX_RECOMMENDATIONS = 10

NO_PROFILE_MESSAGE = "No resume uploaded yet"


class RecommendationStatus(str, Enum):
    OK = "ok"
    NO_PROFILE = "no_profile"


def match_percentage(match_score: float) -> int:
    """Score as a whole percentage, halves rounded up."""
    return int(math.floor(match_score * 100 + 0.5))


@dataclass(frozen=True)
class RankedJob:
    """A recommended job with its match score."""

    job: JobPosting
    match_score: float
    matched_skills: list[str] = field(default_factory=list)

    @property
    def match_percentage(self) -> int:
        return match_percentage(self.match_score)

    def to_dict(self) -> dict:
        return {
            **self.job.model_dump(mode="json"),
            "match_score": self.match_score,
            "match_percentage": self.match_percentage,
            "matched_skills": list(self.matched_skills),
        }


@dataclass(frozen=True)
class Recommendations:
    """Result of ranking jobs for one candidate."""

    status: RecommendationStatus
    jobs: list[RankedJob] = field(default_factory=list)
    candidate_skills: list[str] = field(default_factory=list)
    message: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "status": self.status.value,
            "recommendations": [r.to_dict() for r in self.jobs],
            "user_skills": list(self.candidate_skills),
        }
        if self.message:
            data["message"] = self.message
        return data


def rank(
    candidate_skills: Optional[Sequence[str]],
    jobs: Sequence[JobPosting],
) -> Recommendations:
    """
    Rank jobs for a candidate.

    Args:
        candidate_skills: The candidate's skills, or None when the candidate
            has no skill profile at all
        jobs: Job postings to consider, in their natural order

    Returns:
        Recommendations with at most MAX_RECOMMENDATIONS jobs scoring above
        MATCH_THRESHOLD, best first. Equal scores keep the input order.
    """
    if candidate_skills is None:
        return Recommendations(
            status=RecommendationStatus.NO_PROFILE,
            message=NO_PROFILE_MESSAGE,
        )

    candidate_skills = list(candidate_skills)
    scored = []
    for job in jobs:
        job_score = score(candidate_skills, job.skills)
        if job_score > MATCH_THRESHOLD:
            scored.append(
                RankedJob(
                    job=job,
                    match_score=job_score,
                    matched_skills=matched_skills(candidate_skills, job.skills),
                )
            )

    # sorted() is stable, so ties stay in input order
    ranked = sorted(scored, key=lambda r: r.match_score, reverse=True)
    top = ranked[:MAX_RECOMMENDATIONS]

    logger.debug(
        f"Ranked {len(jobs)} jobs: {len(scored)} above threshold, "
        f"returning {len(top)}"
    )

    return Recommendations(
        status=RecommendationStatus.OK,
        jobs=top,
        candidate_skills=candidate_skills,
    )
