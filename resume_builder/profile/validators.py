"""
Section validators for the application profile.

Pure functions deciding whether a section is complete and which advisory
messages the form shows next to it. Nothing here blocks saving or
navigation: results feed the progress indicator and per-section badges only.

Rules:
- personal: full name 2-100 chars, valid email, phone 10-20 chars
- links: at least one syntactically valid URL (https:// auto-prefixed)
- skills: at least one technical and one soft skill
- education / experience: non-empty, every item valid
- projects / certifications / achievements: non-empty, required fields filled
- jobRole: title present, description of at least 50 characters
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Union
from urllib.parse import urlparse

from pydantic import BaseModel

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
from .sections import LIST_SECTIONS, RECORD_SECTIONS, SectionId, parse_section_id

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

JOB_DESCRIPTION_MIN_LENGTH = 50


@dataclass
class ValidationReport:
    """Validation outcome for one section."""
    section: SectionId
    complete: bool
    messages: List[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        """True when there is nothing to show next to the section."""
        return not self.messages


# =============================================================================
# LINKS
# =============================================================================

def format_link(url: str) -> str:
    """Prefix https:// to a link typed without a scheme."""
    if not url:
        return ""
    url = url.strip()
    return url if url.startswith("http") else f"https://{url}"


def is_valid_url(url: str) -> bool:
    """Syntactic URL check after auto-prefixing. Empty input is not a URL."""
    if not url or not url.strip():
        return False
    candidate = format_link(url)
    if any(ch.isspace() for ch in candidate):
        return False
    try:
        parsed = urlparse(candidate)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.hostname)


# =============================================================================
# RECORD VALIDATORS
# Each returns "field: message" strings, empty when valid.
# =============================================================================

def validate_personal(personal: PersonalInfo) -> List[str]:
    messages = []
    name = personal.fullName.strip()
    if len(name) < 2:
        messages.append("fullName: Full name must be at least 2 characters")
    elif len(name) > 100:
        messages.append("fullName: Full name is too long")
    if not EMAIL_PATTERN.match(personal.email.strip()):
        messages.append("email: Please enter a valid email address")
    phone = personal.phone.strip()
    if len(phone) < 10:
        messages.append("phone: Please enter a valid phone number")
    elif len(phone) > 20:
        messages.append("phone: Phone number is too long")
    if len(personal.address) > 200:
        messages.append("address: Address is too long")
    return messages


def validate_links(links: Links) -> List[str]:
    messages = []
    values = {
        "linkedin": links.linkedin,
        "github": links.github,
        "portfolio": links.portfolio,
        "other": links.other,
    }
    for name, value in values.items():
        if value and not is_valid_url(value):
            messages.append(f"{name}: Please enter a valid URL")
    if not any(is_valid_url(value) for value in values.values()):
        messages.append("linkedin: Please provide at least one professional link")
    return messages


def validate_skills(skills: Skills) -> List[str]:
    messages = []
    if not skills.technical:
        messages.append("technical: Please add at least one technical skill")
    if not skills.soft:
        messages.append("soft: Please add at least one soft skill")
    return messages


def validate_job_role(job_role: JobRole) -> List[str]:
    messages = []
    if len(job_role.title.strip()) < 2:
        messages.append("title: Job title is required")
    if len(job_role.description.strip()) < JOB_DESCRIPTION_MIN_LENGTH:
        messages.append(
            "description: Please provide a more detailed job description "
            f"(at least {JOB_DESCRIPTION_MIN_LENGTH} characters)"
        )
    return messages


# =============================================================================
# ITEM VALIDATORS
# =============================================================================

def _parse_year(value: str):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def validate_education_item(item: EducationItem) -> List[str]:
    messages = []
    if len(item.school.strip()) < 2:
        messages.append("school: School name is required")
    if len(item.degree.strip()) < 2:
        messages.append("degree: Degree is required")
    if len(item.field.strip()) < 2:
        messages.append("field: Field of study is required")
    for name in ("startYear", "endYear"):
        if len(getattr(item, name)) != 4:
            label = "Start year" if name == "startYear" else "End year"
            messages.append(f"{name}: {label} is required")

    start, end = _parse_year(item.startYear), _parse_year(item.endYear)
    if start is None or end is None or start > end:
        messages.append("endYear: End year must be after start year")
    return messages


def validate_experience_item(item: ExperienceItem) -> List[str]:
    messages = []
    if len(item.company.strip()) < 2:
        messages.append("company: Company name is required")
    if len(item.position.strip()) < 2:
        messages.append("position: Position is required")
    if not item.startDate.strip():
        messages.append("startDate: Start date is required")
    if not item.responsibilities:
        messages.append("responsibilities: Please add at least one responsibility")

    has_end_date = bool(item.endDate.strip())
    if item.current == has_end_date:
        messages.append("endDate: Either mark as current position or provide end date")
    return messages


def validate_project_item(item: ProjectItem) -> List[str]:
    messages = []
    if len(item.title.strip()) < 2:
        messages.append("title: Project title is required")
    if len(item.description.strip()) < 10:
        messages.append("description: Please provide a more detailed description")
    if not item.technologies:
        messages.append("technologies: Please add at least one technology")
    if item.link and not is_valid_url(item.link):
        messages.append("link: Please enter a valid URL")
    return messages


def validate_certification_item(item: CertificationItem) -> List[str]:
    messages = []
    if len(item.name.strip()) < 2:
        messages.append("name: Certification name is required")
    if len(item.issuer.strip()) < 2:
        messages.append("issuer: Issuer is required")
    if not item.date.strip():
        messages.append("date: Date is required")
    return messages


def validate_achievement_item(item: AchievementItem) -> List[str]:
    messages = []
    if len(item.title.strip()) < 2:
        messages.append("title: Achievement title is required")
    if len(item.description.strip()) < 10:
        messages.append("description: Please provide a more detailed description")
    if not item.date.strip():
        messages.append("date: Date is required")
    return messages


# Required-field checks for the "recommended" list sections. Looser than the
# item validators above, whose messages stay advisory.

def _project_filled(item: ProjectItem) -> bool:
    return bool(item.title and item.description and item.technologies)


def _certification_filled(item: CertificationItem) -> bool:
    return bool(item.name and item.issuer and item.date)


def _achievement_filled(item: AchievementItem) -> bool:
    return bool(item.title and item.description and item.date)


_RECORD_VALIDATORS: Dict[SectionId, Callable[[Any], List[str]]] = {
    SectionId.PERSONAL: validate_personal,
    SectionId.LINKS: validate_links,
    SectionId.SKILLS: validate_skills,
    SectionId.JOB_ROLE: validate_job_role,
}

_ITEM_VALIDATORS: Dict[SectionId, Callable[[Any], List[str]]] = {
    SectionId.EDUCATION: validate_education_item,
    SectionId.EXPERIENCE: validate_experience_item,
    SectionId.PROJECTS: validate_project_item,
    SectionId.CERTIFICATIONS: validate_certification_item,
    SectionId.ACHIEVEMENTS: validate_achievement_item,
}

_EMPTY_LIST_MESSAGES = {
    SectionId.EDUCATION: "Please add at least one education entry",
    SectionId.EXPERIENCE: "Please add at least one work experience",
    SectionId.PROJECTS: "Please add at least one project",
    SectionId.CERTIFICATIONS: "Please add at least one certification",
    SectionId.ACHIEVEMENTS: "Please add at least one achievement",
}


def _coerce(section: SectionId, data: Any) -> Any:
    """Accept raw dicts (e.g. straight from JSON) as well as models."""
    if section in RECORD_SECTIONS:
        model = RECORD_SECTIONS[section]
        if data is None:
            return model()
        return data if isinstance(data, BaseModel) else model.model_validate(data)

    model = LIST_SECTIONS[section]
    return [
        item if isinstance(item, BaseModel) else model.model_validate(item)
        for item in (data or [])
    ]


# =============================================================================
# PUBLIC API
# =============================================================================

def is_section_complete(section_id: Union[str, SectionId], data: Any) -> bool:
    """Decide whether one section counts as complete for progress display."""
    section = parse_section_id(section_id)
    value = _coerce(section, data)

    if section == SectionId.LINKS:
        return any(
            is_valid_url(link)
            for link in (value.linkedin, value.github, value.portfolio, value.other)
        )
    if section in _RECORD_VALIDATORS:
        return not _RECORD_VALIDATORS[section](value)

    if not value:
        return False
    if section == SectionId.PROJECTS:
        return all(_project_filled(item) for item in value)
    if section == SectionId.CERTIFICATIONS:
        return all(_certification_filled(item) for item in value)
    if section == SectionId.ACHIEVEMENTS:
        return all(_achievement_filled(item) for item in value)
    return all(not _ITEM_VALIDATORS[section](item) for item in value)


def validate_section(section_id: Union[str, SectionId], data: Any) -> ValidationReport:
    """Completion flag plus the inline messages for one section."""
    section = parse_section_id(section_id)
    value = _coerce(section, data)

    if section in _RECORD_VALIDATORS:
        messages = _RECORD_VALIDATORS[section](value)
    elif not value:
        messages = [_EMPTY_LIST_MESSAGES[section]]
    else:
        messages = [
            f"{section.value}[{index}].{message}"
            for index, item in enumerate(value)
            for message in _ITEM_VALIDATORS[section](item)
        ]

    return ValidationReport(
        section=section,
        complete=is_section_complete(section, value),
        messages=messages,
    )
