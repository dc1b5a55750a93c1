"""
Narrative generation backends.

NarrativeGenerator is the boundary a real text-generation model would sit
behind. The shipped TemplateNarrativeGenerator fills fixed sentence
templates from the profile: no randomness and no clock, so identical input
always produces identical text.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import List

from ..profile.models import ApplicationProfile, ExperienceItem, ProjectItem
from .models import (
    CoverLetterContent,
    EnhancedExperience,
    EnhancedProject,
    GenerateResponse,
    ResumeContent,
)

PROJECT_IMPACT = "Delivered significant value through innovative technical solutions and user-centered design."
GREETING = "Dear Hiring Manager,"


class NarrativeGenerator(ABC):
    """
    Abstract narrative generation capability.

    Implementations may be slow (remote model calls); generate() is a
    coroutine so callers never block the event loop while waiting.
    """

    @abstractmethod
    async def generate(self, profile: ApplicationProfile) -> GenerateResponse:
        """
        Produce resume and cover-letter narrative for a profile.

        Args:
            profile: Complete application profile (already validated by the caller)

        Returns:
            GenerateResponse with resume and cover-letter parts
        """
        pass


# =============================================================================
# TEMPLATE PIECES
# =============================================================================

def build_summary(profile: ApplicationProfile) -> str:
    technical = profile.skills.technical
    soft = profile.skills.soft
    field = profile.education[0].field if profile.education else ""
    return (
        f"Dynamic {profile.jobRole.title} with expertise in {', '.join(technical[:3])}. "
        "Proven track record of delivering innovative solutions and driving results in fast-paced environments. "
        f"Strong background in {field or 'technology'} with excellent {' and '.join(soft[:2])} skills."
    )


def enhance_responsibility(responsibility: str) -> str:
    return f"• Enhanced: {responsibility} - resulting in improved efficiency and team productivity"


def enhance_experience(experience: List[ExperienceItem]) -> List[EnhancedExperience]:
    """Rewrite every responsibility 1:1, keeping entry and bullet order."""
    return [
        EnhancedExperience(
            **item.model_dump(),
            enhancedResponsibilities=[enhance_responsibility(r) for r in item.responsibilities],
        )
        for item in experience
    ]


def enhance_projects(projects: List[ProjectItem]) -> List[EnhancedProject]:
    return [
        EnhancedProject(
            **project.model_dump(),
            enhancedDescription=(
                f"{project.description} - This project demonstrates advanced proficiency in "
                f"{' and '.join(project.technologies[:2])}."
            ),
            impact=PROJECT_IMPACT,
        )
        for project in projects
    ]


def build_cover_letter(profile: ApplicationProfile) -> CoverLetterContent:
    """
    Assemble the cover letter text and its individual pieces.

    The experience paragraph appears only when the profile has experience.
    """
    job = profile.jobRole
    technical = profile.skills.technical
    top_three = ", ".join(technical[:3])
    top_five = ", ".join(technical[:5])
    passion = technical[0] if technical else "technology"
    at_company = f" at {job.company}" if job.company else ""
    company_possessive = f"{job.company}'s" if job.company else "your organization's"

    opening_line = f"I am writing to express my strong interest in the {job.title} position{at_company}."
    background = (
        f"With my extensive background in {top_three}, I am excited about the opportunity "
        "to contribute to your team's success."
    )
    expertise = (
        f"In my previous roles, I have developed expertise in {top_five}. My experience has "
        "enabled me to deliver innovative solutions and drive meaningful results."
    )
    motivation = (
        f"I am particularly drawn to this role because it aligns perfectly with my passion for "
        f"{passion} and my commitment to excellence."
    )
    closing = (
        f"I would welcome the opportunity to discuss how my skills and enthusiasm can contribute to "
        f"{company_possessive} continued success. Thank you for considering my application."
    )

    paragraphs = [
        GREETING,
        f"{opening_line} {background}",
        f"{expertise} {motivation}",
    ]
    if profile.experience:
        first = profile.experience[0]
        first_duty = first.responsibilities[0].lower() if first.responsibilities else ""
        paragraphs.append(
            f"At {first.company}, I {first_duty or 'contributed significantly to the team'}. "
            "This experience has prepared me to make an immediate impact in your organization."
        )
    paragraphs.append(closing)
    paragraphs.append(f"Sincerely,\n{profile.personal.fullName}")

    return CoverLetterContent(
        content="\n\n".join(paragraphs),
        personalizedOpening=f"{GREETING}\n\n{opening_line}",
        bodyParagraphs=[background, expertise, motivation],
        strongClosing=closing,
    )


def build_generated_content(profile: ApplicationProfile) -> GenerateResponse:
    """Pure template fill of every generated piece."""
    return GenerateResponse(
        resume=ResumeContent(
            summary=build_summary(profile),
            enhancedExperience=enhance_experience(profile.experience),
            enhancedProjects=enhance_projects(profile.projects),
        ),
        coverLetter=build_cover_letter(profile),
    )


class TemplateNarrativeGenerator(NarrativeGenerator):
    """
    Deterministic template-substitution generator.

    Waits `delay_seconds` before answering to behave like a remote model
    call; the wait is an asyncio suspension, not a blocking sleep.
    """

    def __init__(self, delay_seconds: float = 0.0):
        self.delay_seconds = delay_seconds

    async def generate(self, profile: ApplicationProfile) -> GenerateResponse:
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)
        return build_generated_content(profile)
