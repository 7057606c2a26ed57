"""
Keyword skill extraction.
"""

from typing import Optional

from loguru import logger

from .vocabulary import SkillVocabulary


def extract_skills(text: Optional[str], vocabulary: SkillVocabulary) -> list[str]:
    """
    Find vocabulary skills mentioned in free text.

    A skill matches when its lowercase name occurs anywhere in the lowercased
    text (plain substring containment, no word boundaries).

    Args:
        text: Free text, e.g. job requirements and description
        vocabulary: Canonical skill names to look for

    Returns:
        Canonical names of the matched skills, in vocabulary order
    """
    if not text or not text.strip():
        return []

    text_lower = text.lower()
    found = [skill for skill in vocabulary if skill.lower() in text_lower]

    logger.debug(f"Extracted {len(found)} skills: {found}")
    return found


def job_skill_text(description: Optional[str], requirements: Optional[str]) -> str:
    """Text a posting's skills are extracted from."""
    return f"{requirements or ''} {description or ''}"
