from skills import DEFAULT_SKILLS, SkillVocabulary, extract_skills, job_skill_text


def test_extracts_skills_in_vocabulary_order(small_vocabulary):
    text = "Looking for a React and Node.js developer"

    assert extract_skills(text, small_vocabulary) == ["React", "Node.js"]


def test_order_follows_vocabulary_not_text(small_vocabulary):
    text = "AWS first, then some MongoDB and finally React"

    assert extract_skills(text, small_vocabulary) == ["React", "MongoDB", "AWS"]


def test_matching_is_case_insensitive_and_returns_canonical_names(small_vocabulary):
    assert extract_skills("we use REACT, mongodb and aws", small_vocabulary) == [
        "React",
        "MongoDB",
        "AWS",
    ]


def test_empty_and_blank_text_yield_nothing(small_vocabulary):
    assert extract_skills("", small_vocabulary) == []
    assert extract_skills("   \n\t", small_vocabulary) == []
    assert extract_skills(None, small_vocabulary) == []


def test_substring_containment_without_word_boundaries():
    vocabulary = SkillVocabulary()
    found = extract_skills("Strong JavaScript background", vocabulary)

    # "Java" is contained in "JavaScript"
    assert found == ["JavaScript", "Java"]


def test_result_is_subset_of_vocabulary_and_present_in_text():
    vocabulary = SkillVocabulary()
    text = (
        "Experience with AWS, Docker, Kubernetes, CI/CD. "
        "Knowledge of monitoring and logging tools."
    )

    found = extract_skills(text, vocabulary)

    assert found == ["AWS", "Docker", "Kubernetes", "CI/CD"]
    for skill in found:
        assert skill in DEFAULT_SKILLS
        assert skill.lower() in text.lower()


def test_job_skill_text_joins_requirements_and_description():
    assert job_skill_text("Build APIs", "Node.js") == "Node.js Build APIs"
    assert job_skill_text(None, None) == " "


def test_duplicate_vocabulary_entries_are_reported_once():
    vocabulary = SkillVocabulary(skills=("React", "react"))

    assert extract_skills("react dev", vocabulary) == ["React"]
