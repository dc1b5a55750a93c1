"""
Form Controller - owns the in-progress application profile.

Tracks the active wizard section, replaces sections wholesale, persists the
whole profile to the draft store after every update, and computes the
progress figures shown by the form (rubric completion percentage and
per-section badges).

Validation results never gate navigation or saving.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import ValidationError

from ..common.error_handling import SectionUpdateError
from ..drafts.store import DraftStore, get_draft_store
from ..profile.models import (
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
)
from ..profile.sections import (
    FORM_SECTIONS,
    LIST_SECTIONS,
    RECORD_SECTIONS,
    SectionId,
    parse_section_id,
    section_index,
)
from ..profile.validators import is_section_complete

logger = logging.getLogger(__name__)

# Rubric units behind completion_percentage()
COMPLETION_TOTAL_UNITS = 14


class FormController:
    """
    Single-editor controller for one ApplicationProfile.

    Usage:
        controller = FormController(store)
        controller.load_draft()
        controller.update_skills(controller.profile.skills.add_technical("Go"))
        controller.completion_percentage()
    """

    def __init__(self, store: Optional[DraftStore] = None):
        """
        Args:
            store: Draft slot to persist to (defaults to the file-backed store)
        """
        self.store = store or get_draft_store()
        self.profile = ApplicationProfile()
        self.current_section: SectionId = FORM_SECTIONS[0].id

    # ==========================================================================
    # DRAFT LIFECYCLE
    # ==========================================================================

    def load_draft(self) -> ApplicationProfile:
        """
        Restore the persisted draft, if any.

        An absent or corrupt draft leaves the empty default profile in place;
        the store logs the failure.
        """
        draft = self.store.load()
        if draft is None:
            logger.info("No usable draft found, starting from an empty profile")
            self.profile = ApplicationProfile()
        else:
            logger.info("Draft restored")
            self.profile = draft
        return self.profile

    def save_draft(self) -> None:
        """Persist the current profile (also done after every update)."""
        self.store.save(self.profile)

    def reset_draft(self) -> ApplicationProfile:
        """Clear the persisted draft and restore the empty profile."""
        self.store.clear()
        self.profile = ApplicationProfile()
        self.current_section = FORM_SECTIONS[0].id
        return self.profile

    # ==========================================================================
    # SECTION UPDATES
    # ==========================================================================

    def update_section(self, section_id: Union[str, SectionId], value: Any) -> ApplicationProfile:
        """
        Replace one section wholesale and persist the profile.

        Args:
            section_id: Section identifier ("job-role" accepted for jobRole)
            value: Complete replacement value: the section model (or a list
                   of item models for list sections); dicts are coerced

        Raises:
            SectionUpdateError: unknown section or a value of the wrong shape
        """
        section = parse_section_id(section_id)
        new_value = self._coerce_section_value(section, value)

        self.profile = self.profile.model_copy(update={section.value: new_value})
        self.store.save(self.profile)
        logger.debug(f"Section '{section.value}' updated")
        return self.profile

    def _coerce_section_value(self, section: SectionId, value: Any) -> Any:
        try:
            if section in RECORD_SECTIONS:
                model = RECORD_SECTIONS[section]
                if isinstance(value, model):
                    return value.model_copy(deep=True)
                if isinstance(value, dict):
                    return model.model_validate(value)
                raise SectionUpdateError(
                    f"Section '{section.value}' expects {model.__name__}, got {type(value).__name__}"
                )

            model = LIST_SECTIONS[section]
            if not isinstance(value, (list, tuple)):
                raise SectionUpdateError(
                    f"Section '{section.value}' expects a list of {model.__name__}, "
                    f"got {type(value).__name__}"
                )
            items = []
            for item in value:
                if isinstance(item, model):
                    items.append(item.model_copy(deep=True))
                elif isinstance(item, dict):
                    items.append(model.model_validate(item))
                else:
                    raise SectionUpdateError(
                        f"Section '{section.value}' items must be {model.__name__}, "
                        f"got {type(item).__name__}"
                    )
            return items
        except ValidationError as e:
            raise SectionUpdateError(f"Invalid value for section '{section.value}': {e}") from e

    def update_personal(self, personal: PersonalInfo) -> ApplicationProfile:
        return self.update_section(SectionId.PERSONAL, personal)

    def update_links(self, links: Links) -> ApplicationProfile:
        return self.update_section(SectionId.LINKS, links)

    def update_education(self, education: List[EducationItem]) -> ApplicationProfile:
        return self.update_section(SectionId.EDUCATION, education)

    def update_skills(self, skills: Skills) -> ApplicationProfile:
        return self.update_section(SectionId.SKILLS, skills)

    def update_experience(self, experience: List[ExperienceItem]) -> ApplicationProfile:
        return self.update_section(SectionId.EXPERIENCE, experience)

    def update_projects(self, projects: List[ProjectItem]) -> ApplicationProfile:
        return self.update_section(SectionId.PROJECTS, projects)

    def update_certifications(self, certifications: List[CertificationItem]) -> ApplicationProfile:
        return self.update_section(SectionId.CERTIFICATIONS, certifications)

    def update_achievements(self, achievements: List[AchievementItem]) -> ApplicationProfile:
        return self.update_section(SectionId.ACHIEVEMENTS, achievements)

    def update_job_role(self, job_role: JobRole) -> ApplicationProfile:
        return self.update_section(SectionId.JOB_ROLE, job_role)

    def section_value(self, section_id: Union[str, SectionId]) -> Any:
        return getattr(self.profile, parse_section_id(section_id).value)

    # ==========================================================================
    # NAVIGATION
    # ==========================================================================

    def go_to(self, section_id: Union[str, SectionId]) -> SectionId:
        self.current_section = parse_section_id(section_id)
        return self.current_section

    def next_section(self) -> SectionId:
        """Advance one step; stays on the last section."""
        index = section_index(self.current_section)
        if index < len(FORM_SECTIONS) - 1:
            self.current_section = FORM_SECTIONS[index + 1].id
        return self.current_section

    def previous_section(self) -> SectionId:
        """Go back one step; stays on the first section."""
        index = section_index(self.current_section)
        if index > 0:
            self.current_section = FORM_SECTIONS[index - 1].id
        return self.current_section

    @property
    def is_first_section(self) -> bool:
        return section_index(self.current_section) == 0

    @property
    def is_last_section(self) -> bool:
        return section_index(self.current_section) == len(FORM_SECTIONS) - 1

    # ==========================================================================
    # PROGRESS
    # ==========================================================================

    def completion_percentage(self) -> int:
        """
        Weighted completion over a fixed 14-unit rubric.

        personal (4), jobRole (3), skills (2), links (2), experience,
        education and projects presence (1 each).
        """
        p = self.profile
        checks = [
            # Personal info
            p.personal.fullName,
            p.personal.email,
            p.personal.phone,
            p.personal.address,
            # Target job
            p.jobRole.title,
            p.jobRole.company,
            p.jobRole.description,
            # Skills
            p.skills.technical,
            p.skills.soft,
            # Links
            p.links.linkedin or p.links.github or p.links.portfolio,
            p.links.other,
            # Presence of list sections
            p.experience,
            p.education,
            p.projects,
        ]
        completed = sum(1 for check in checks if check)
        ratio = Decimal(100 * completed) / Decimal(COMPLETION_TOTAL_UNITS)
        return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    def section_status(self) -> Dict[SectionId, bool]:
        """Completion badge per section, in wizard order."""
        return {
            section.id: is_section_complete(section.id, getattr(self.profile, section.id.value))
            for section in FORM_SECTIONS
        }

    def completed_sections(self) -> int:
        return sum(1 for complete in self.section_status().values() if complete)

    def section_progress(self) -> float:
        """Share of complete sections, 0-100."""
        return self.completed_sections() / len(FORM_SECTIONS) * 100

    def generation_readiness(self) -> Tuple[bool, List[str]]:
        """
        Check the profile before asking for generated content.

        Returns:
            Tuple of (ready, messages). Required and recommended items both
            produce messages; the profile is ready only when there are none.
        """
        p = self.profile
        messages = []
        if not p.personal.fullName:
            messages.append("Full name is required")
        if not p.personal.email:
            messages.append("Email is required")
        if not p.jobRole.title:
            messages.append("Target job title is required")
        if not p.skills.technical:
            messages.append("At least one technical skill is recommended")
        if not p.experience:
            messages.append("At least one work experience is recommended")
        return not messages, messages
