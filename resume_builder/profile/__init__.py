"""Application profile: data model, section catalogue and validators."""

from .models import (
    AchievementItem,
    ApplicationProfile,
    CertificationItem,
    EducationItem,
    ExperienceItem,
    JobRole,
    Links,
    PersonalInfo,
    ProjectItem,
    Skills,
    append_item,
    remove_item,
    replace_item,
)
from .ordered_set import OrderedSet
from .sections import FORM_SECTIONS, FormSection, SectionId, parse_section_id, suggest_skills
from .validators import ValidationReport, is_section_complete, validate_section

__all__ = [
    "AchievementItem",
    "ApplicationProfile",
    "CertificationItem",
    "EducationItem",
    "ExperienceItem",
    "JobRole",
    "Links",
    "PersonalInfo",
    "ProjectItem",
    "Skills",
    "append_item",
    "remove_item",
    "replace_item",
    "OrderedSet",
    "FORM_SECTIONS",
    "FormSection",
    "SectionId",
    "parse_section_id",
    "suggest_skills",
    "ValidationReport",
    "is_section_complete",
    "validate_section",
]
