"""
Pydantic models for the application profile.

Field names follow the browser client's camelCase JSON keys, so the same
models validate HTTP request bodies, draft files and controller updates.

Sub-records expose copy-returning builder helpers: an update never mutates
the instance it was derived from. The form controller replaces whole
sections with the values these helpers produce.
"""

from typing import Any, List, Optional, TypeVar

from pydantic import BaseModel, Field, field_validator, model_validator

from .ordered_set import OrderedSet, dedupe

T = TypeVar("T")


def _clean(value: str) -> str:
    return (value or "").strip()


class PersonalInfo(BaseModel):
    """Basic contact information."""

    fullName: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""


class Links(BaseModel):
    """Professional profiles and portfolios. Every field is optional."""

    linkedin: str = ""
    github: str = ""
    portfolio: str = ""
    other: str = ""

    def has_any(self) -> bool:
        return any([self.linkedin, self.github, self.portfolio, self.other])


class EducationItem(BaseModel):
    """One academic qualification. Years are kept as entered (4-digit strings)."""

    school: str = ""
    degree: str = ""
    field: str = ""
    startYear: str = ""
    endYear: str = ""
    gpa: Optional[str] = None


class Skills(BaseModel):
    """Technical and soft skills, each an insertion-ordered set."""

    technical: List[str] = Field(default_factory=list)
    soft: List[str] = Field(default_factory=list)

    @field_validator("technical", "soft")
    @classmethod
    def _drop_duplicates(cls, v: List[str]) -> List[str]:
        return dedupe(v)

    def _with_added(self, attr: str, skill: str) -> "Skills":
        skill = _clean(skill)
        values = OrderedSet(getattr(self, attr))
        if not skill or not values.add(skill):
            return self.model_copy(deep=True)
        return self.model_copy(update={attr: values.to_list()}, deep=True)

    def _with_removed(self, attr: str, skill: str) -> "Skills":
        values = OrderedSet(getattr(self, attr))
        values.discard(skill)
        return self.model_copy(update={attr: values.to_list()}, deep=True)

    def add_technical(self, skill: str) -> "Skills":
        return self._with_added("technical", skill)

    def add_soft(self, skill: str) -> "Skills":
        return self._with_added("soft", skill)

    def remove_technical(self, skill: str) -> "Skills":
        return self._with_removed("technical", skill)

    def remove_soft(self, skill: str) -> "Skills":
        return self._with_removed("soft", skill)


class ExperienceItem(BaseModel):
    """
    One position held.

    `current` and `endDate` are mutually exclusive; use with_current() and
    with_end_date() to keep them consistent. Inconsistent raw data is still
    accepted here and reported by the validators.
    """

    company: str = ""
    position: str = ""
    startDate: str = ""
    endDate: str = ""
    current: bool = False
    responsibilities: List[str] = Field(default_factory=list)

    @field_validator("responsibilities")
    @classmethod
    def _drop_duplicates(cls, v: List[str]) -> List[str]:
        return dedupe(v)

    def with_current(self, current: bool) -> "ExperienceItem":
        """Mark (or unmark) as the current position. Marking clears endDate."""
        update = {"current": current}
        if current:
            update["endDate"] = ""
        return self.model_copy(update=update, deep=True)

    def with_end_date(self, end_date: str) -> "ExperienceItem":
        """Set the end date. A non-empty end date clears `current`."""
        end_date = _clean(end_date)
        update = {"endDate": end_date}
        if end_date:
            update["current"] = False
        return self.model_copy(update=update, deep=True)

    def add_responsibility(self, text: str) -> "ExperienceItem":
        text = _clean(text)
        values = OrderedSet(self.responsibilities)
        if text:
            values.add(text)
        return self.model_copy(update={"responsibilities": values.to_list()}, deep=True)

    def remove_responsibility(self, index: int) -> "ExperienceItem":
        return self.model_copy(
            update={"responsibilities": remove_item(self.responsibilities, index)}, deep=True
        )


class ProjectItem(BaseModel):
    """A notable project."""

    title: str = ""
    description: str = ""
    technologies: List[str] = Field(default_factory=list)
    link: Optional[str] = None

    @field_validator("technologies")
    @classmethod
    def _drop_duplicates(cls, v: List[str]) -> List[str]:
        return dedupe(v)

    def add_technology(self, technology: str) -> "ProjectItem":
        technology = _clean(technology)
        values = OrderedSet(self.technologies)
        if technology:
            values.add(technology)
        return self.model_copy(update={"technologies": values.to_list()}, deep=True)

    def remove_technology(self, index: int) -> "ProjectItem":
        return self.model_copy(
            update={"technologies": remove_item(self.technologies, index)}, deep=True
        )


class CertificationItem(BaseModel):
    """A professional certification."""

    name: str = ""
    issuer: str = ""
    date: str = ""
    expiryDate: Optional[str] = None


class AchievementItem(BaseModel):
    """An award or accomplishment."""

    title: str = ""
    description: str = ""
    date: str = ""


class JobRole(BaseModel):
    """The job the documents are tailored for."""

    title: str = ""
    company: str = ""
    description: str = ""


class ApplicationProfile(BaseModel):
    """
    The full aggregate record: one candidate's career data plus target job.

    Created empty, replaced section by section, serialized to the draft slot
    after every update.
    """

    personal: PersonalInfo = Field(default_factory=PersonalInfo)
    links: Links = Field(default_factory=Links)
    education: List[EducationItem] = Field(default_factory=list)
    skills: Skills = Field(default_factory=Skills)
    experience: List[ExperienceItem] = Field(default_factory=list)
    projects: List[ProjectItem] = Field(default_factory=list)
    certifications: List[CertificationItem] = Field(default_factory=list)
    achievements: List[AchievementItem] = Field(default_factory=list)
    jobRole: JobRole = Field(default_factory=JobRole)

    @model_validator(mode="before")
    @classmethod
    def _null_sections_to_defaults(cls, data: Any) -> Any:
        # A section sent as null reads as the empty section.
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, text: str) -> "ApplicationProfile":
        """Parse a serialized profile. Raises pydantic.ValidationError on bad input."""
        return cls.model_validate_json(text)


# ===== Ordered list helpers =====
# List index is the only identity of an entry; these never mutate their input.

def append_item(items: List[T], item: T) -> List[T]:
    return [*items, item]


def replace_item(items: List[T], index: int, item: T) -> List[T]:
    """Return a copy with items[index] replaced. Raises IndexError if out of range."""
    if not 0 <= index < len(items):
        raise IndexError(f"index {index} out of range for {len(items)} items")
    return [item if i == index else existing for i, existing in enumerate(items)]


def remove_item(items: List[T], index: int) -> List[T]:
    """Return a copy without the entry at index (no-op for unknown indexes)."""
    return [existing for i, existing in enumerate(items) if i != index]
