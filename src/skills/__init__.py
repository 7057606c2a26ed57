"""
Skill Matcher - keyword skill extraction, overlap scoring and job ranking.
"""

from .extractor import extract_skills, job_skill_text
from .ranker import (
    MATCH_THRESHOLD,
    MAX_RECOMMENDATIONS,
    RankedJob,
    RecommendationStatus,
    Recommendations,
    rank,
)
from .scorer import matched_skills, score
from .vocabulary import DEFAULT_SKILLS, SkillVocabulary, load_vocabulary

__all__ = [
    "extract_skills",
    "job_skill_text",
    "score",
    "matched_skills",
    "rank",
    "RankedJob",
    "Recommendations",
    "RecommendationStatus",
    "MATCH_THRESHOLD",
    "MAX_RECOMMENDATIONS",
    "SkillVocabulary",
    "DEFAULT_SKILLS",
    "load_vocabulary",
]
