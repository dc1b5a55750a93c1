"""
Pydantic models for generated content.

Same camelCase keys as the profile models. Every field has a default so a
client can send back partial generated content with a render request.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..profile.models import ExperienceItem, ProjectItem


class EnhancedExperience(ExperienceItem):
    """An experience entry plus rewritten responsibilities (same order, same count)."""

    enhancedResponsibilities: List[str] = Field(default_factory=list)


class EnhancedProject(ProjectItem):
    """A project entry plus an expanded description and an impact statement."""

    enhancedDescription: str = ""
    impact: str = ""


class ResumeContent(BaseModel):
    summary: str = ""
    enhancedExperience: List[EnhancedExperience] = Field(default_factory=list)
    enhancedProjects: List[EnhancedProject] = Field(default_factory=list)


class CoverLetterContent(BaseModel):
    content: str = ""
    personalizedOpening: str = ""
    bodyParagraphs: List[str] = Field(default_factory=list)
    strongClosing: str = ""


class GenerateResponse(BaseModel):
    """Full output of the content generation service."""

    resume: ResumeContent
    coverLetter: CoverLetterContent


class ResumeGenerateResponse(BaseModel):
    resume: ResumeContent


class CoverLetterGenerateResponse(BaseModel):
    coverLetter: CoverLetterContent


class GeneratedContent(BaseModel):
    """Generated content as accepted by the renderer; either part may be absent."""

    resume: Optional[ResumeContent] = None
    coverLetter: Optional[CoverLetterContent] = None
