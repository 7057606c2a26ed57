"""
Skill vocabulary.
The fixed list of canonical skill names the extractor recognises.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional

import yaml
from loguru import logger

DEFAULT_SKILLS = (
    "JavaScript", "Python", "Java", "React", "Node.js", "MongoDB", "SQL",
    "AWS", "Docker", "Kubernetes", "Git", "HTML", "CSS", "TypeScript",
    "Angular", "Vue.js", "Express", "Django", "Flask", "Spring Boot",
    "PostgreSQL", "MySQL", "Redis", "GraphQL", "REST API", "Machine Learning",
    "Data Science", "DevOps", "CI/CD", "Agile", "Scrum", "Project Management",
)


def _unique_skills(skills: Iterable[str]) -> tuple[str, ...]:
    """Strip names, dropping blanks, non-strings and case-insensitive duplicates."""
    seen: set[str] = set()
    unique = []
    for skill in skills:
        if not isinstance(skill, str):
            continue
        name = skill.strip()
        if not name or name.lower() in seen:
            continue
        seen.add(name.lower())
        unique.append(name)
    return tuple(unique)


@dataclass(frozen=True)
class SkillVocabulary:
    """Ordered, duplicate-free set of canonical skill names."""

    skills: tuple[str, ...] = DEFAULT_SKILLS

    def __post_init__(self):
        object.__setattr__(self, "skills", _unique_skills(self.skills))

    @classmethod
    def from_iterable(cls, skills: Iterable[str]) -> "SkillVocabulary":
        """Build a vocabulary, dropping blanks and case-insensitive duplicates."""
        return cls(skills=tuple(skills))

    @classmethod
    def from_yaml(cls, path: Path) -> "SkillVocabulary":
        """Load from a YAML file with a top-level `skills:` list."""
        if not path.exists():
            raise FileNotFoundError(f"Skill vocabulary not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict) or not isinstance(data.get("skills"), list):
            raise ValueError(f"Expected a `skills:` list in {path}")

        vocabulary = cls.from_iterable(data["skills"])
        logger.info(f"Loaded {len(vocabulary)} skills from {path}")
        return vocabulary

    def __iter__(self) -> Iterator[str]:
        return iter(self.skills)

    def __len__(self) -> int:
        return len(self.skills)

    def __contains__(self, skill: object) -> bool:
        if not isinstance(skill, str):
            return False
        return skill.lower() in {s.lower() for s in self.skills}


def load_vocabulary(path: Optional[Path] = None) -> SkillVocabulary:
    """Vocabulary from `path`, or the built-in one when no path is given."""
    if path is None:
        return SkillVocabulary()
    return SkillVocabulary.from_yaml(Path(path))
