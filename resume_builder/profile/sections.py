"""
Section catalogue of the application profile.

Nine independently editable sections in fixed wizard order, the value type
each one holds, and the suggested skills offered by the skills section.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Tuple, Union

from .models import (
    AchievementItem,
    CertificationItem,
    EducationItem,
    ExperienceItem,
    JobRole,
    Links,
    PersonalInfo,
    ProjectItem,
    Skills,
)
from ..common.error_handling import SectionUpdateError


class SectionId(str, Enum):
    """Section identifiers, equal to the profile attribute names."""
    PERSONAL = "personal"
    LINKS = "links"
    EDUCATION = "education"
    SKILLS = "skills"
    EXPERIENCE = "experience"
    PROJECTS = "projects"
    CERTIFICATIONS = "certifications"
    ACHIEVEMENTS = "achievements"
    JOB_ROLE = "jobRole"


@dataclass(frozen=True)
class FormSection:
    """Display metadata for one wizard step."""
    id: SectionId
    label: str
    description: str


FORM_SECTIONS: Tuple[FormSection, ...] = (
    FormSection(SectionId.PERSONAL, "Personal Info", "Basic contact information"),
    FormSection(SectionId.LINKS, "Links", "Professional profiles and portfolios"),
    FormSection(SectionId.EDUCATION, "Education", "Academic qualifications"),
    FormSection(SectionId.SKILLS, "Skills", "Technical and soft skills"),
    FormSection(SectionId.EXPERIENCE, "Experience", "Work history and roles"),
    FormSection(SectionId.PROJECTS, "Projects", "Notable projects and contributions"),
    FormSection(SectionId.CERTIFICATIONS, "Certifications", "Professional certifications"),
    FormSection(SectionId.ACHIEVEMENTS, "Achievements", "Awards and accomplishments"),
    FormSection(SectionId.JOB_ROLE, "Target Job", "Job role you're applying for"),
)

# Record sections hold one model; list sections hold a list of item models
RECORD_SECTIONS: Dict[SectionId, type] = {
    SectionId.PERSONAL: PersonalInfo,
    SectionId.LINKS: Links,
    SectionId.SKILLS: Skills,
    SectionId.JOB_ROLE: JobRole,
}

LIST_SECTIONS: Dict[SectionId, type] = {
    SectionId.EDUCATION: EducationItem,
    SectionId.EXPERIENCE: ExperienceItem,
    SectionId.PROJECTS: ProjectItem,
    SectionId.CERTIFICATIONS: CertificationItem,
    SectionId.ACHIEVEMENTS: AchievementItem,
}

# Wizard URLs use "job-role"
_ALIASES = {"job-role": SectionId.JOB_ROLE, "job_role": SectionId.JOB_ROLE}


def parse_section_id(section_id: Union[str, SectionId]) -> SectionId:
    """
    Resolve a section identifier, accepting the "job-role" alias.

    Raises:
        SectionUpdateError: for unknown identifiers
    """
    if isinstance(section_id, SectionId):
        return section_id
    if section_id in _ALIASES:
        return _ALIASES[section_id]
    try:
        return SectionId(section_id)
    except ValueError:
        raise SectionUpdateError(f"Unknown section: {section_id!r}")


def section_index(section_id: Union[str, SectionId]) -> int:
    sid = parse_section_id(section_id)
    return next(i for i, section in enumerate(FORM_SECTIONS) if section.id == sid)


# ===== Suggested skills =====

SUGGESTED_TECHNICAL_SKILLS: Tuple[str, ...] = (
    "JavaScript", "Python", "React", "Node.js", "TypeScript", "SQL", "Git", "AWS",
    "Docker", "MongoDB", "PostgreSQL", "GraphQL", "REST APIs", "HTML/CSS", "Java",
    "C++", "PHP", "Ruby", "Go", "Kubernetes", "Jenkins", "Redis", "Elasticsearch",
)

SUGGESTED_SOFT_SKILLS: Tuple[str, ...] = (
    "Communication", "Leadership", "Problem Solving", "Teamwork", "Time Management",
    "Critical Thinking", "Adaptability", "Project Management", "Creativity", "Analytical Thinking",
    "Attention to Detail", "Customer Service", "Negotiation", "Public Speaking", "Mentoring",
)


def suggest_skills(kind: str, current: Iterable[str]) -> List[str]:
    """
    Suggested skills of one kind ("technical" or "soft") not already present.

    Raises:
        ValueError: for an unknown kind
    """
    if kind == "technical":
        pool = SUGGESTED_TECHNICAL_SKILLS
    elif kind == "soft":
        pool = SUGGESTED_SOFT_SKILLS
    else:
        raise ValueError(f"kind must be 'technical' or 'soft', got {kind!r}")
    present = set(current)
    return [skill for skill in pool if skill not in present]
