"""
Content Generation Service.

Validates the profile, then delegates to a NarrativeGenerator. Stateless:
every call receives the complete profile and returns complete output.

Required fields:
- generate / generate_cover_letter: personal.fullName and jobRole.title
- generate_resume: personal.fullName
"""

from typing import Optional

from ..common.config import Config
from ..common.error_handling import require_fields
from ..common.logger import get_logger
from ..profile.models import ApplicationProfile
from .models import (
    CoverLetterGenerateResponse,
    GenerateResponse,
    ResumeGenerateResponse,
)
from .narrative import NarrativeGenerator, TemplateNarrativeGenerator

FULL_NAME = "personal.fullName"
JOB_TITLE = "jobRole.title"
NAME_AND_TITLE_REQUIRED = "Missing required fields: personal.fullName and jobRole.title are required"


class ContentGenerationService:
    """
    Produces generated resume and cover-letter narrative.

    Usage:
        service = ContentGenerationService()
        content = await service.generate(profile)
    """

    def __init__(self, generator: Optional[NarrativeGenerator] = None, delay_seconds: Optional[float] = None):
        """
        Args:
            generator: Narrative backend (defaults to the template generator)
            delay_seconds: Simulated latency of the default generator
                           (defaults to Config.GENERATION_DELAY_SECONDS)
        """
        if generator is None:
            delay = Config.GENERATION_DELAY_SECONDS if delay_seconds is None else delay_seconds
            generator = TemplateNarrativeGenerator(delay_seconds=delay)
        self.generator = generator

    async def _run(self, profile: ApplicationProfile, kind: str, request_id: Optional[str]) -> GenerateResponse:
        log = get_logger(__name__, request_id=request_id, component="generation")
        log.info(
            f"Generating {kind} content (experience={len(profile.experience)}, "
            f"projects={len(profile.projects)})"
        )
        result = await self.generator.generate(profile)
        log.info(f"Generated {kind} content")
        return result

    async def generate(self, profile: ApplicationProfile, request_id: Optional[str] = None) -> GenerateResponse:
        """
        Generate resume and cover-letter content.

        Raises:
            ProfileValidationError: fullName or jobRole.title missing
        """
        require_fields(profile, FULL_NAME, JOB_TITLE, message=NAME_AND_TITLE_REQUIRED)
        return await self._run(profile, "resume and cover letter", request_id)

    async def generate_resume(
        self, profile: ApplicationProfile, request_id: Optional[str] = None
    ) -> ResumeGenerateResponse:
        """
        Generate resume content only.

        Raises:
            ProfileValidationError: fullName missing
        """
        require_fields(profile, FULL_NAME)
        result = await self._run(profile, "resume", request_id)
        return ResumeGenerateResponse(resume=result.resume)

    async def generate_cover_letter(
        self, profile: ApplicationProfile, request_id: Optional[str] = None
    ) -> CoverLetterGenerateResponse:
        """
        Generate cover-letter content only.

        Raises:
            ProfileValidationError: fullName or jobRole.title missing
        """
        require_fields(profile, FULL_NAME, JOB_TITLE, message=NAME_AND_TITLE_REQUIRED)
        result = await self._run(profile, "cover letter", request_id)
        return CoverLetterGenerateResponse(coverLetter=result.coverLetter)
